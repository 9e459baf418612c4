'''
Stateless RPN expression evaluation.
'''

from collections import deque
import logging

from .lexer import Lexer
from .util import InvalidExpression, binary


log = logging.getLogger(__name__)


def _popstack(stack, n=1):
    '''
    Pop n elements from stack, topmost first.
    '''
    if len(stack) < n:
        raise InvalidExpression()
    return [stack.pop() for _ in range(n)]


def evaluate(expression):
    '''
    Evaluate a whitespace-separated RPN expression, and return its value.

    Operators take the second-popped element as their left operand: 9 2 /
    is 4.5, not 0.2222. The stack must end up holding exactly one element.

    :raises InvalidNumber: on a token that is neither operator nor number.
    :raises InvalidExpression: on too few operands, or too many left over.
    :raises DivisionByZero: on dividing by zero.
    '''
    lexer = Lexer()
    stack = deque()
    for match in lexer.lex(expression):
        parsed = lexer.parse(match)
        if lexer.isoperator(match):
            # If you don't reverse, you'll do 2 / 9 when you say 9 2 /.
            right, left = _popstack(stack, 2)
            stack.append(binary(parsed, left, right))
        else:
            stack.append(parsed)
    if len(stack) != 1:
        raise InvalidExpression()
    log.debug('%r = %r', expression, stack[0])
    return stack[0]
