from decimal import Decimal
from functools import wraps
import operator
import math


class CalcError(Exception):
    '''
    Base of all user errors. Caught and printed by the session loops.
    '''
    message = 'Calculator error'

    def __str__(self):
        if self.args:
            return str(self.args[0])
        return type(self).message


class DivisionByZero(CalcError):
    message = 'Division by zero'


class InvalidOperator(CalcError):
    message = 'Invalid operator'


class InvalidNumber(CalcError):
    message = 'Invalid number'


class InvalidExpression(CalcError):
    message = 'Invalid expression'


class InvalidInput(CalcError):
    message = 'Invalid input'


class InvalidChoice(CalcError):
    message = 'Invalid choice'


def wrap_user_errors(errors):
    '''
    Decorator that converts Python exceptions to calculator errors.

    :param errors: Mapping of exception type to CalcError subclass.

    Passes through CalcErrors, and anything not in errors.
    '''
    caught = tuple(errors)

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except caught as e:
                for kind, error in errors.items():
                    if isinstance(e, kind):
                        raise error() from e
                raise
        return wrapper
    return decorator


# Binary arithmetic operators, shared by both modes. Keys are what the user
# types.
OPERATORS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': operator.__truediv__,
}


@wrap_user_errors({ZeroDivisionError: DivisionByZero,
                   KeyError: InvalidOperator})
def binary(symbol, left, right):
    '''
    Apply operator named by symbol to left and right, in that order.
    '''
    return OPERATORS[symbol](left, right)


def format_number(number):
    '''
    Shortest round-tripping digits, positional, no trailing .0.
    '''
    if math.isnan(number):
        return 'NaN'
    elif math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    text = format(Decimal(repr(number)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
