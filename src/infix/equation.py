'''
One fully processed calculator entry.

All the work happens once, at construction: balance check, conversion to
postfix and prefix, evaluation and base conversion. The result is either an
Evaluated record or the NotBalancedError that stopped the pipeline.
'''

from collections import namedtuple
import logging
import math

from .balance import is_balanced
from .bases import round_half_up, to_binary, to_hex
from .evaluator import evaluate_postfix
from .notation import infix_to_postfix, infix_to_prefix
from .util import NotBalancedError


logger = logging.getLogger(__name__)

Evaluated = namedtuple('Evaluated', 'postfix prefix answer binary hex')


def parse(text):
    '''
    Run text through the whole pipeline.

    Returns an Evaluated on success, otherwise the NotBalancedError
    describing why the equation could not be evaluated.
    '''
    if not is_balanced(text):
        return NotBalancedError()
    try:
        postfix = infix_to_postfix(text)
        prefix = infix_to_prefix(text)
        answer = evaluate_postfix(postfix)
    except NotBalancedError as e:
        return e
    if math.isfinite(answer):
        rounded = round_half_up(answer)
        binary, hex_ = to_binary(rounded), to_hex(rounded)
    else:
        binary = hex_ = Equation.ZERO
    return Evaluated(postfix, prefix, answer, binary, hex_)


class Equation:
    '''
    Immutable infix equation along with everything derived from it.

    Unbalanced or faulted equations carry sentinel values instead of
    partially computed ones.
    '''

    SENTINEL = 'N/A'
    ZERO = '0'
    # Equation, prefix, postfix, answer, binary, hexadecimal.
    ROW = '{:<35}{:<35}{:<24}{:>16.3f}{:>18}{:>17}'

    __slots__ = ('_text', '_outcome')

    def __init__(self, text):
        self._text = text
        self._outcome = parse(text)
        if self.fault is not None:
            logger.info('Equation %r not evaluated: %s',
                        text, self.fault.args[0])

    @property
    def text(self):
        return self._text

    @property
    def outcome(self):
        return self._outcome

    @property
    def fault(self):
        '''
        The error that stopped evaluation, or None.
        '''
        if isinstance(self._outcome, NotBalancedError):
            return self._outcome
        return None

    @property
    def balanced(self):
        return self.fault is None

    def _derived(self, field, default):
        if self.fault is not None:
            return default
        return getattr(self._outcome, field)

    @property
    def prefix(self):
        return self._derived('prefix', self.SENTINEL)

    @property
    def postfix(self):
        return self._derived('postfix', self.SENTINEL)

    @property
    def answer(self):
        return self._derived('answer', 0.0)

    @property
    def binary(self):
        return self._derived('binary', self.ZERO)

    @property
    def hex(self):
        return self._derived('hex', self.ZERO)

    def format_row(self):
        '''
        Render all fields as one fixed width table row.
        '''
        return self.ROW.format(self.text, self.prefix, self.postfix,
                               self.answer, self.binary, self.hex)

    def __str__(self):
        return self.format_row()

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.text)
