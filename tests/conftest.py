from pytest import fixture

from infix.equation import Equation
from infix.history import HistoryStack


@fixture
def history():
    return HistoryStack()


@fixture
def two_equations(history):
    '''
    History holding 1+1 (pushed first) and 2*3 (on top).
    '''
    first, second = Equation('1+1'), Equation('2*3')
    history.push(first)
    history.push(second)
    return first, second
