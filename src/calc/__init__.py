'''
Interactive calculator.

Two modes, picked from a menu:

- Basic: a running value you add to, subtract from, multiply and divide,
  with one memory slot to store it into and recall it from.
- RPN: evaluates whole Reverse Polish Notation expressions, e.g. 3 4 + 5 *.
  Nothing carries over between expressions.

Plain binary64 floats throughout. Not intended as anything more!
'''

from .accumulator import Accumulator
from .cli import CLI
from .lexer import Lexer
from .rpn import evaluate
from .session import Mode, Session


__all__ = 'Accumulator', 'CLI', 'Lexer', 'Mode', 'Session', 'evaluate'
