'''
Binary operations and their precedence table

Every operation follows IEEE 754 float semantics where Python would raise,
except integer division by zero which is an explicit error
'''

import math
import operator

from .errors import DivideByZero


def divide(a, b):
    '''
    True division, a zero divisor gives an infinity or NaN
    '''
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def integer_divide(a, b):
    '''
    Division truncated toward zero
    '''
    if b == 0:
        raise DivideByZero('Integer division by zero: {} \\ {}'.format(a, b))
    quotient = a / b
    if not math.isfinite(quotient):
        return quotient
    return float(math.trunc(quotient))


def remainder(a, b):
    '''
    Floating point remainder carrying the sign of the dividend
    '''
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def power(a, b):
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and b % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # zero to a negative power, or a negative base to a fractional power
        if a == 0:
            return math.inf
        return math.nan


operations = [
    {
        '+': operator.add,
        '-': operator.sub,
    },
    {
        '*': operator.mul,
        '/': divide,
        '\\': integer_divide,
        '%': remainder,
    },
    {
        '^': power,
    },
]


def lookup(symbol, operations=operations):
    '''
    Finds an operator in an operations table
    Returns a (precedence, function) pair, the lowest precedence is 1
    '''
    for i, ops in enumerate(operations):
        if symbol in ops:
            return i + 1, ops[symbol]
    raise KeyError(symbol)
