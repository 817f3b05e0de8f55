'''
Balance checking, precedence and infix conversion tests
'''

from pytest import mark, raises

from infix.balance import is_balanced
from infix.notation import (infix_to_postfix, infix_to_prefix,
                            operator_precedence)
from infix.util import NotBalancedError


@mark.parametrize('text, balanced', [
    ('(2+3', False),
    ('(2+3)', True),
    (')(', False),
    ('', True),
    ('2+3', True),
    ('((1)', False),
    ('(1))', False),
    ('((1)+(2))', True),
])
def test_is_balanced(text, balanced):
    assert is_balanced(text) is balanced


@mark.parametrize('ch, precedence', [
    ('^', 3),
    ('*', 2), ('/', 2), ('%', 2),
    ('+', 1), ('-', 1),
    ('(', 0), (')', 0),
    ('x', -1), ('1', -1), (' ', -1),
])
def test_operator_precedence(ch, precedence):
    assert operator_precedence(ch) == precedence


@mark.parametrize('text, postfix', [
    ('2+3*4', '2 3 4 * +'),
    ('(2+3)*4', '2 3 + 4 *'),
    ('10-4-3', '10 4 - 3 -'),
    ('2^3^2', '2 3 2 ^ ^'),
    ('12 + 345', '12 345 +'),
    ('5', '5'),
    ('8%3/2', '8 3 % 2 /'),
])
def test_infix_to_postfix(text, postfix):
    assert infix_to_postfix(text) == postfix


@mark.parametrize('text, prefix', [
    ('2+3*4', '+ 2 * 3 4'),
    ('2*3+4', '+ * 2 3 4'),
    ('(2+3)*4', '* + 2 3 4'),
    ('2^3^2', '^ 2 ^ 3 2'),
    ('12+345', '+ 12 345'),
    ('5', '5'),
])
def test_infix_to_prefix(text, prefix):
    assert infix_to_prefix(text) == prefix


@mark.parametrize('convert', [infix_to_postfix, infix_to_prefix])
def test_unbalanced_is_fault(convert):
    with raises(NotBalancedError, match='not balanced'):
        convert('(2+3')
