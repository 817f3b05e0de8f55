'''
Infix desk calculator.

Parses infix arithmetic, converts it to prefix and postfix, evaluates it,
renders the answer in binary and hexadecimal, and keeps an undoable history
of everything entered.

Only non-negative integer literals and the binary operators + - * / % ^
with parentheses. ^ is right associative, everything else left
associative.
'''

from .cli import CLI
from .equation import Equation
from .history import HistoryStack
from .util import (CalculatorError, NotBalancedError, InvalidPositionError,
                   EmptyHistoryError, NoUndoneEquationError)


__all__ = ('Equation', 'HistoryStack', 'CLI',
           'CalculatorError', 'NotBalancedError', 'InvalidPositionError',
           'EmptyHistoryError', 'NoUndoneEquationError')
