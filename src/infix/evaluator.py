import math
import operator

from .lexer import Lexer, Number, Operator, OPERATORS
from .stack import TokenStack
from .util import NotBalancedError


def _remainder(left, right):
    '''
    Remainder with the sign of the dividend, NaN when undefined.
    '''
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _power(left, right):
    '''
    IEEE style power: no exceptions, infinities and NaN instead.
    '''
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and right.is_integer() and right % 2:
            return -math.inf
        return math.inf
    except ValueError:
        if left == 0 and right < 0:
            return math.inf
        return math.nan


# Arithmetic, left OP right.
BUILTINS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': operator.__truediv__,
    '%': _remainder,
    '^': _power,
}

assert set(BUILTINS) == set(OPERATORS)


def _value(token):
    if not isinstance(token, Number):
        raise NotBalancedError('Not enough numbers.')
    return token.value


def evaluate_postfix(postfix):
    '''
    Evaluate a space separated postfix string and return a float.

    Raises NotBalancedError when an operator lacks operands, an operand isn't
    a number, or on division by zero.
    '''
    stack = TokenStack()
    for token in Lexer().split(postfix):
        if not isinstance(token, Operator):
            stack.push(token)
            continue
        # Topmost is the right hand side: 9 2 ^ is 9**2, not 2**9.
        right, left = stack.pop(2)
        right, left = _value(right), _value(left)
        if token.symbol == '/' and right == 0:
            raise NotBalancedError("Divisor can't be zero.")
        stack.push(Number.of(BUILTINS[token.symbol](left, right)))
    if stack.is_empty():
        raise NotBalancedError('Nothing to evaluate.')
    return _value(stack.peek())
