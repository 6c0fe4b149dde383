'''Single pass infix calculator

Reads one line of infix arithmetic and prints its value

Operators, lowest precedence first:
    + -
    * / \\ %     (\\ is integer division, % is the floating point remainder)
    ^
Every operator is left associative, so 2^3^2 is 64
( ) and [ ] may both be used for grouping but must nest properly
A number or closed group followed by an open delimiter is multiplied: 2(3+4)
'''

import sys
import math
import logging

from .errors import (
    CalculatorError,
    InvalidExpression,
    StackUnderflow,
    DivideByZero,
    InputFailure,
)
from .equations import evaluate, evaluate_stream, solve
from .tokens import Token, Tokenizer, tokenize

logger = logging.getLogger(__name__)

prompt = 'Infix expression:'


def format_value(value):
    '''
    Formats a result, spelling out Infinity and NaN
    '''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    return str(value)


def main(stream=None, out=None):
    '''
    Reads an expression from stream and prints its value to out
    Invalid expressions are reported, fatal errors propagate
    '''
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out

    print(prompt, file=out)
    try:
        value = evaluate_stream(stream)
    except InvalidExpression as e:
        logger.debug('Rejected expression: %s', e)
        if e.args:
            print('Invalid expression: {}'.format(e.args[0]), file=out)
        else:
            print('Invalid expression', file=out)
    else:
        print(format_value(value), file=out)
