from collections import namedtuple
from functools import reduce
import operator

import regex


# Every binary operator symbol the calculator understands.
OPERATORS = ('+', '-', '*', '/', '%', '^')
PARENS = ('(', ')')


class Number(namedtuple('Number', 'text value')):
    __slots__ = ()

    @classmethod
    def of(cls, value):
        return cls(repr(value), value)

    def __str__(self):
        return self.text


class Operator(namedtuple('Operator', 'symbol')):
    __slots__ = ()

    def __str__(self):
        return self.symbol


class Paren(namedtuple('Paren', 'symbol')):
    __slots__ = ()

    def __str__(self):
        return self.symbol


class Word(namedtuple('Word', 'text')):
    '''
    Anything in a postfix string that is neither a number nor an operator.
    '''
    __slots__ = ()

    def __str__(self):
        return self.text


class Lexer:
    '''
    Lexer for infix equations and space separated postfix strings.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Digits are grouped greedily; no decimal point, no sign.
    NUMBER = r'\d+'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    PAREN = r'(?:' + r'|'.join(map(regex.escape, PARENS)) + r')'
    # Everything else is skipped over, one character at a time.
    OTHER = r'.'

    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<paren>' + PAREN + r')|' \
             r'(?<other>' + OTHER + r')'
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, text):
        '''
        Yield the tokens of an infix equation, left to right.
        '''
        for match in regex.finditer(type(self).LEXEME, text,
                                    flags=type(self).FLAGS):
            kind = match.lastgroup
            lexeme = match.group(0)
            if kind == 'number':
                yield Number(lexeme, float(lexeme))
            elif kind == 'operator':
                yield Operator(lexeme)
            elif kind == 'paren':
                yield Paren(lexeme)

    def split(self, postfix):
        '''
        Yield the tokens of a postfix string, split on single spaces.
        '''
        for field in postfix.split(' '):
            if not field:
                continue
            if field in OPERATORS:
                yield Operator(field)
                continue
            try:
                yield Number(field, float(field))
            except ValueError:
                yield Word(field)
