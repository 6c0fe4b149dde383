'''
Lexing of a single line of infix arithmetic into tokens
'''

import re
from collections import namedtuple

from .errors import InputFailure
from .operations import operations

NUMBER = 'NUMBER'
OPERATOR = 'OPERATOR'
OPEN = 'OPEN'
CLOSE = 'CLOSE'
END = 'END'
UNKNOWN = 'UNKNOWN'

Token = namedtuple('Token', ['type', 'value'])

open_delimiters = '(['
close_delimiters = ')]'


def token_patterns(operations=operations):
    '''
    Builds the (pattern, type) table used by tokenize
    Operators are matched longest first so multi-character symbols win
    '''
    symbols = sorted({op for ops in operations for op in ops}, key=len, reverse=True)
    patterns = [
        (r'\n', END),
        (r'\d+\.?\d*|\.\d+', NUMBER),
    ]
    if symbols:
        patterns.append(('|'.join(map(re.escape, symbols)), OPERATOR))
    patterns.extend([
        ('[{}]'.format(re.escape(open_delimiters)), OPEN),
        ('[{}]'.format(re.escape(close_delimiters)), CLOSE),
        (r'[^\W\d_]\w*', UNKNOWN),
        (r'.', UNKNOWN),
    ])
    return patterns


def tokenize(line, operations=operations):
    '''
    Lazily yields the tokens of one line of text

    The newline or the end of the text produces an END token,
    nothing is produced after it
    '''
    pattern = re.compile('|'.join(
        '(?P<{}{}>{})'.format(type, i, p)
        for i, (p, type) in enumerate(token_patterns(operations))))
    whitespace = re.compile(r'[^\S\n]*')

    pos = whitespace.match(line).end()
    while pos < len(line):
        match = pattern.match(line, pos)
        type = match.lastgroup.rstrip('0123456789')
        text = match.group()
        if type == END:
            break
        elif type == NUMBER:
            yield Token(NUMBER, float(text))
        else:
            yield Token(type, text)
        pos = whitespace.match(line, match.end()).end()
    yield Token(END, None)


class Tokenizer:
    '''
    Token source reading its expression from a text stream

    Exactly one line is read, on the first pull
    '''
    def __init__(self, stream, operations=operations):
        self.stream = stream
        self.operations = operations
        self.tokens = None

    def __iter__(self):
        return self

    def __next__(self):
        if self.tokens is None:
            try:
                line = self.stream.readline()
            except (OSError, UnicodeDecodeError) as e:
                raise InputFailure('Could not read expression: {}'.format(e)) from e
            self.tokens = tokenize(line, operations=self.operations)
        return next(self.tokens)
