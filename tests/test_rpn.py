'''
RPN evaluation tests
'''

from calc.rpn import evaluate
from calc.util import DivisionByZero, InvalidExpression, InvalidNumber

from pytest import mark, raises


@mark.parametrize('expression, value', [
    ('3 4 +', 7.0),
    ('3 4 + 5 *', 35.0),
    ('42', 42.0),
    ('10 3 -', 7.0),
    ('9 2 /', 4.5),
    ('5 1 2 + 4 * + 3 -', 14.0),
    ('  2   3\t* ', 6.0),
    ('-1 -2 -', 1.0),
])
def test_evaluate(expression, value):
    assert evaluate(expression) == value


def test_division_by_zero():
    with raises(DivisionByZero):
        evaluate('10 0 /')


@mark.parametrize('expression', ['1 2', '+', '1 +', '', '   ', '1 2 3 +'])
def test_invalid_expression(expression):
    with raises(InvalidExpression, match='Invalid expression'):
        evaluate(expression)


@mark.parametrize('expression', ['abc', '1 2 x', 'abc +', '1 2 + 3,5 *'])
def test_invalid_number(expression):
    with raises(InvalidNumber):
        evaluate(expression)


def test_first_failing_token_wins():
    # The operator underflows before the bad number is reached.
    with raises(InvalidExpression):
        evaluate('+ abc')


def test_repeatable():
    assert evaluate('1.5 2 *') == evaluate('1.5 2 *') == 3.0
