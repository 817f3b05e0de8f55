'''
Equation pipeline tests
'''

import math

from pytest import raises

from infix.equation import Equation, Evaluated, parse
from infix.util import NotBalancedError


def test_evaluated():
    e = Equation('2+3*4')
    assert e.balanced
    assert e.fault is None
    assert e.postfix == '2 3 4 * +'
    assert e.prefix == '+ 2 * 3 4'
    assert '{:.3f}'.format(e.answer) == '14.000'
    assert e.binary == '1110'
    assert e.hex == 'E'


def test_right_associative_power():
    e = Equation('2^3^2')
    assert '{:.3f}'.format(e.answer) == '512.000'
    assert e.binary == '1000000000'
    assert e.hex == '200'


def test_single_number():
    e = Equation('5')
    assert e.postfix == '5'
    assert e.prefix == '5'
    assert '{:.3f}'.format(e.answer) == '5.000'
    assert e.binary == '101'
    assert e.hex == '5'


def test_unbalanced():
    e = Equation('(2+3')
    assert not e.balanced
    assert e.fault.args[0] == 'Equation is not valid (not balanced).'
    assert e.prefix == e.postfix == 'N/A'
    assert e.answer == 0
    assert e.binary == e.hex == '0'


def test_division_by_zero_unbalances():
    e = Equation('4/0')
    assert not e.balanced
    assert isinstance(e.fault, NotBalancedError)
    assert e.fault.args[0] == "Divisor can't be zero."
    assert e.answer == 0
    assert e.binary == e.hex == '0'
    assert e.prefix == e.postfix == 'N/A'


def test_missing_operand_unbalances():
    e = Equation('2+')
    assert not e.balanced
    assert e.fault.args[0] == 'Not enough operands.'


def test_empty_equation():
    e = Equation('')
    assert not e.balanced
    assert e.fault.args[0] == 'Nothing to evaluate.'


def test_bases_round_half_up():
    e = Equation('7/2')
    assert e.answer == 3.5
    assert e.binary == '100'
    assert e.hex == '4'


def test_non_finite_answer_keeps_value():
    e = Equation('5%0')
    assert e.balanced
    assert math.isnan(e.answer)
    assert e.binary == e.hex == '0'


def test_answer_reentered():
    first = Equation('(12+3)*4-6/3')
    assert first.answer == 58.0
    again = Equation('{:.0f}'.format(first.answer))
    assert again.answer == first.answer


def test_text_kept_verbatim():
    e = Equation(' 1 + 2 ')
    assert e.text == ' 1 + 2 '
    assert e.postfix == '1 2 +'


def test_immutable():
    e = Equation('1+1')
    with raises(AttributeError):
        e.answer = 3
    with raises(AttributeError):
        e.text = '1+2'
    with raises(AttributeError):
        e.comment = 'nope'


def test_parse_outcome():
    assert parse('1+1') == Evaluated('1 1 +', '+ 1 1', 2.0, '10', '2')
    assert isinstance(parse('(1'), NotBalancedError)
    assert isinstance(parse('1/0'), NotBalancedError)


def test_format_row():
    assert Equation('5').format_row() == (
        '{:<35}{:<35}{:<24}{:>16}{:>18}{:>17}'.format(
            '5', '5', '5', '5.000', '101', '5'))
    assert str(Equation('(1')) == Equation('(1').format_row()
    assert 'N/A' in str(Equation('(1'))


def test_repr():
    assert repr(Equation('1+1')) == "Equation('1+1')"
