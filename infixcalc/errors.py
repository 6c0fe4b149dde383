class CalculatorError (Exception):
    pass


class InvalidExpression (CalculatorError):
    '''
    The expression is malformed
    args[0] holds the reason
    '''
    pass


class StackUnderflow (CalculatorError, IndexError):
    pass


class DivideByZero (CalculatorError, ZeroDivisionError):
    pass


class InputFailure (CalculatorError):
    '''
    The input channel failed while reading the expression
    '''
    pass
