'''
Infix to postfix and prefix conversion.

Both directions are the shunting-yard algorithm over the same precedence
table. The prefix conversion runs it right to left with the roles of the
parentheses swapped, then reverses the result.
'''

import logging

from .balance import is_balanced
from .lexer import Lexer, Number, Paren
from .stack import TokenStack
from .util import NotBalancedError


logger = logging.getLogger(__name__)

PRECEDENCE = {
    '^': 3,
    '*': 2,
    '/': 2,
    '%': 2,
    '+': 1,
    '-': 1,
    '(': 0,
    ')': 0,
}


def operator_precedence(ch):
    '''
    Return the binding strength of ch, or -1 if it isn't an operator.
    '''
    return PRECEDENCE.get(ch, -1)


def _require_balanced(text):
    if not is_balanced(text):
        raise NotBalancedError()


def _postfix_yields(top, current):
    '''
    Return True if the stacked operator top is output before current.

    Left associative, except for exponentiation.
    '''
    top = operator_precedence(str(top))
    precedence = operator_precedence(str(current))
    return top > precedence or (top == precedence and str(current) != '^')


def _prefix_yields(top, current):
    # Scanning backwards flips the associativity tie-break.
    return operator_precedence(str(top)) >= operator_precedence(str(current))


def _shunt(tokens, opening, closing, yields):
    '''
    Run the shunting-yard algorithm over tokens, returning the output tokens.
    '''
    stack = TokenStack()
    output = []
    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Paren) and token.symbol == opening:
            stack.push(token)
        elif isinstance(token, Paren) and token.symbol == closing:
            while not stack.is_empty() and str(stack.peek()) != opening:
                output.extend(stack.pop())
            # Discard the matching parenthesis.
            stack.pop()
        else:
            while not stack.is_empty() and yields(stack.peek(), token):
                output.extend(stack.pop())
            stack.push(token)
    output.extend(stack.pop(len(stack)))
    return output


def infix_to_postfix(text):
    '''
    Convert a balanced infix equation to space separated postfix.

    >>> infix_to_postfix('2+3*4')
    '2 3 4 * +'
    '''
    _require_balanced(text)
    tokens = Lexer().lex(text)
    postfix = ' '.join(map(str, _shunt(tokens, '(', ')', _postfix_yields)))
    logger.debug('%r -> postfix %r', text, postfix)
    return postfix


def infix_to_prefix(text):
    '''
    Convert a balanced infix equation to space separated prefix.

    >>> infix_to_prefix('2+3*4')
    '+ 2 * 3 4'
    '''
    _require_balanced(text)
    tokens = reversed(list(Lexer().lex(text)))
    output = _shunt(tokens, ')', '(', _prefix_yields)
    prefix = ' '.join(map(str, reversed(output))).strip()
    logger.debug('%r -> prefix %r', text, prefix)
    return prefix
