'''
Lexer tests
'''

import math

from calc.util import InvalidNumber
from calc.lexer import Lexer

from pytest import mark, raises


@mark.parametrize('token, value', [
    ('10', 10.0),
    ('-3', -3.0),
    ('+2.5', 2.5),
    ('.5', 0.5),
    ('5.', 5.0),
    ('1e3', 1000.0),
    ('1.5E-2', 0.015),
    ('-inf', -math.inf),
    ('Infinity', math.inf),
])
def test_numbers(token, value):
    assert Lexer().number(token) == value


def test_nan():
    assert math.isnan(Lexer().number('NaN'))


@mark.parametrize('token', ['abc', '1_000', '.', 'e5', '1e', '0x10',
                            '١٢', '--1', '1.2.3', ''])
def test_bad_numbers(token):
    with raises(InvalidNumber, match='Invalid number'):
        Lexer().number(token)


def test_operators_and_numbers():
    l = Lexer()
    matches = list(l.lex('3 4 + -5 -'))
    assert [l.isoperator(m) for m in matches] == [False, False, True,
                                                  False, True]
    assert [l.parse(m) for m in matches] == [3.0, 4.0, '+', -5.0, '-']


def test_any_whitespace():
    l = Lexer()
    assert [l.parse(m) for m in l.lex('\t1  2\n')] == [1.0, 2.0]


def test_lexes_lazily():
    l = Lexer()
    matches = l.lex('1 x 2')
    assert l.parse(next(matches)) == 1.0
    with raises(InvalidNumber):
        next(matches)
