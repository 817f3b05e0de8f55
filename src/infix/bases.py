import math


DIGITS = '0123456789ABCDEF'


def to_base(n, base):
    '''
    Render the magnitude of integer n in base, most significant digit first.

    Negative numbers carry no sign.
    '''
    if not 2 <= base <= len(DIGITS):
        raise ValueError('Unsupported base {}'.format(base))
    n = abs(int(n))
    if n == 0:
        return '0'
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(DIGITS[digit])
    return ''.join(reversed(digits))


def to_binary(n):
    return to_base(n, 2)


def to_hex(n):
    return to_base(n, 16)


def round_half_up(x):
    '''
    Round to the nearest integer, halves towards positive infinity.
    '''
    return math.floor(x + 0.5)
