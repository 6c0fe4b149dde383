import io

import pytest

from infixcalc import main
from infixcalc.errors import DivideByZero, InputFailure


def run(line):
    out = io.StringIO()
    main(io.StringIO(line), out)
    return out.getvalue().splitlines()


class BrokenStream:
    def readline(self):
        raise OSError('closed')


class TestMain:
    def test_prints_value(self):
        assert run('2+3*4\n') == ['Infix expression:', '14.0']

    def test_prints_invalid_message(self):
        assert run('(2+3]\n') == ['Infix expression:', 'Invalid expression: mismatched delimiters']

    def test_prints_infinity_and_nan_spelled_out(self):
        assert run('1/0\n')[1] == 'Infinity'
        assert run('-1/0\n')[1] == '-Infinity'
        assert run('0/0\n')[1] == 'NaN'

    def test_divide_by_zero_is_fatal(self):
        with pytest.raises(DivideByZero):
            run('7\\0\n')

    def test_input_failure_is_fatal(self):
        with pytest.raises(InputFailure):
            main(BrokenStream(), io.StringIO())
