from functools import reduce
import operator

import regex

from .util import InvalidNumber, OPERATORS


class Lexer:
    '''
    Lexer for the calculator's token grammar: numbers and operators.

    Tokens are whitespace-separated; there is no need to lex within them.
    Holds no internal state.
    '''
    DIGITS = r'[0-9]+'
    # Number, as a binary64 literal. ASCII digits only; no underscores,
    # unlike Python's float().
    NUMBER = r'''
              [+-]?
              (?:
                  (?:
                      # 1, 1.5, 1. (notice trailing dot)
                      {DIGITS}
                      (?:
                          \.
                          (?:{DIGITS})?
                      )?
                      |
                      # .5
                      \.
                      {DIGITS}
                  )
                  (?:
                      e
                      [+-]?
                      {DIGITS}
                  )?
                  |
                  inf(?:inity)?
                  |
                  nan
              )
              '''.format(DIGITS=DIGITS)

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'

    # All possible tokens.
    TOKEN = r'(?<operator>' + OPERATOR + r')|' \
            r'(?<number>' + NUMBER + r')'
    # Default regex flags for matching tokens
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and lazily yield a match for each token.

        Raises InvalidNumber on reaching a token that is neither operator nor
        number; earlier tokens have been yielded by then.
        '''
        for token in line.split():
            match = regex.fullmatch(type(self).TOKEN, token,
                                    flags=type(self).FLAGS)
            if match is None:
                raise InvalidNumber()
            yield match

    def isoperator(self, match):
        '''
        Return True if token is an operator rather than a number.
        '''
        return match.group('operator') is not None

    def parse(self, match):
        '''
        Return the operator symbol, or the number as a float.
        '''
        if self.isoperator(match):
            return match.group('operator')
        return float(match.group('number'))

    def number(self, token):
        '''
        Parse a single token that must be a number.
        '''
        match = regex.fullmatch(r'(?<number>' + type(self).NUMBER + r')',
                                token,
                                flags=type(self).FLAGS)
        if match is None:
            raise InvalidNumber()
        return float(match.group('number'))
