'''
Single pass evaluation of infix arithmetic expressions

Tokens are converted to postfix order with the shunting-yard algorithm and
every operator is applied as soon as it leaves the operator stack, so no
postfix expression is ever built
'''

import logging

from . import tokens as t
from .errors import InvalidExpression, StackUnderflow
from .operations import operations, lookup
from .stack import Stack

logger = logging.getLogger(__name__)

# pending prefix negation, its entry carries its precedence
NEGATE = 'NEGATE'

delimiter_pairs = dict(zip(t.close_delimiters, t.open_delimiters))


class Evaluation:
    '''
    The state of one evaluation

    operands holds the intermediate values
    operators holds pending operators and open delimiters
    after_operand is true when the last token completed an operand
    open_delimiters counts the delimiters not yet closed
    '''
    def __init__(self, operations=operations):
        self.operations = operations
        self.symbols = {op for ops in operations for op in ops}
        # binds tighter than every level but the highest, so -3^2 is -9
        self.negation_precedence = len(operations) - 0.5
        self.operands = Stack()
        self.operators = Stack()
        self.after_operand = False
        self.open_delimiters = 0
        self.handlers = {
            t.NUMBER: self.handle_number,
            t.OPERATOR: self.handle_operator,
            t.OPEN: self.handle_open,
            t.CLOSE: self.handle_close,
            t.END: self.handle_end,
            t.UNKNOWN: self.handle_unknown,
        }

    def run(self, tokens):
        for token in tokens:
            result = self.dispatch(token)
            if token.type == t.END:
                return result
        return self.handle_end(None)

    def dispatch(self, token):
        try:
            handler = self.handlers[token.type]
        except KeyError:
            raise ValueError('No handler for token type: {}'.format(token.type)) from None
        return handler(token.value)

    def precedence(self, entry):
        '''
        Precedence of an operator stack entry, delimiters are 0
        '''
        type, symbol = entry
        if type == t.OPERATOR:
            return lookup(symbol, self.operations)[0]
        elif type == NEGATE:
            return symbol
        return 0

    def should_pop(self, symbol, top):
        # equal precedence pops, every operator is left associative
        return lookup(symbol, self.operations)[0] <= self.precedence(top)

    def apply(self, entry):
        '''
        Applies a popped operator to the operand stack
        '''
        type, symbol = entry
        try:
            if type == NEGATE:
                symbol = '-'
                value = -self.operands.pop()
                logger.debug('negate -> %r', value)
            else:
                first, second = self.operands.pop(), self.operands.pop()
                value = lookup(symbol, self.operations)[1](second, first)
                logger.debug('%r %s %r -> %r', second, symbol, first, value)
        except StackUnderflow:
            raise InvalidExpression('not enough operands for {}'.format(symbol)) from None
        self.operands.push(value)

    def handle_number(self, value):
        if self.after_operand:
            raise InvalidExpression('two operands in a row')
        self.operands.push(value)
        self.after_operand = True

    def handle_operator(self, symbol):
        if symbol not in self.symbols:
            raise InvalidExpression('unrecognized symbol: {}'.format(symbol))
        if self.operands.empty() and symbol == '-':
            logger.debug('leading minus, pushing 0')
            self.operands.push(0.0)
            self.after_operand = True
        if self.operands.empty():
            raise InvalidExpression('cannot begin with an operator')
        if symbol == '-' and not self.after_operand:
            # an operator waiting beneath the negation resolves with it
            below = 0 if self.operators.empty() else self.precedence(self.operators.peek())
            logger.debug('prefix minus')
            self.operators.push((NEGATE, max(self.negation_precedence, below)))
            return
        if not self.after_operand:
            raise InvalidExpression('two operators in a row')
        self.after_operand = False

        while not self.operators.empty() and self.should_pop(symbol, self.operators.peek()):
            self.apply(self.operators.pop())
        self.operators.push((t.OPERATOR, symbol))

    def handle_open(self, delimiter):
        if self.after_operand and not self.operands.empty():
            if '*' not in self.symbols:
                raise InvalidExpression('implicit multiplication needs a * operator')
            logger.debug('implicit multiplication before %s', delimiter)
            self.operators.push((t.OPERATOR, '*'))
        self.after_operand = False
        self.operators.push((t.OPEN, delimiter))
        self.open_delimiters += 1

    def handle_close(self, delimiter):
        if self.open_delimiters == 0:
            raise InvalidExpression('too many closing delimiters')
        if not self.after_operand:
            raise InvalidExpression('missing operand before closing delimiter')
        while True:
            if self.operators.empty():
                raise InvalidExpression('not enough opening delimiters')
            type, symbol = self.operators.peek()
            if type == t.OPEN:
                if symbol != delimiter_pairs[delimiter]:
                    raise InvalidExpression('mismatched delimiters')
                self.operators.pop()
                self.open_delimiters -= 1
                return
            self.apply(self.operators.pop())

    def handle_end(self, value):
        if self.open_delimiters != 0:
            raise InvalidExpression('too many opening delimiters')
        if not self.after_operand:
            if self.operands.empty():
                raise InvalidExpression('empty expression')
            raise InvalidExpression('cannot end with an operator')

        while not self.operators.empty():
            self.apply(self.operators.pop())

        if len(self.operands) != 1:
            raise InvalidExpression('malformed expression')
        return self.operands.pop()

    def handle_unknown(self, text):
        raise InvalidExpression('unrecognized symbol: {}'.format(text))


def evaluate(tokens, operations=operations):
    '''
    Evaluates a stream of tokens

    Tokens are pulled one at a time up to the END token,
    running out of tokens also ends the expression
    Raises InvalidExpression for malformed expressions
    '''
    return Evaluation(operations=operations).run(tokens)


def solve(expression, operations=operations):
    '''
    Solves an infix expression

    Operations is a list of operation dicts in increasing precedence order
        The keys of each dict should be the operator and the values should be
        a binary function to apply to the operands
        The functions should take float arguments
    '''
    return evaluate(t.tokenize(expression, operations=operations), operations=operations)


def evaluate_stream(stream, operations=operations):
    '''
    Evaluates the first line of a text stream
    '''
    return evaluate(t.Tokenizer(stream, operations=operations), operations=operations)
