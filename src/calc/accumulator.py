import logging

from .util import binary


log = logging.getLogger(__name__)


class Accumulator:
    '''
    Basic calculator state: a current value and one memory slot.

    current is always the left operand of an operation.
    '''

    def __init__(self):
        self.current = 0.0
        self.memory = 0.0

    def apply(self, operator, operand):
        '''
        Set current to current <operator> operand, and return it.

        Raises DivisionByZero or InvalidOperator, leaving current untouched.
        '''
        result = binary(operator, self.current, operand)
        log.debug('%r %s %r = %r', self.current, operator, operand, result)
        self.current = result
        return self.current

    def set(self, value):
        '''
        Set current directly, from a bare number.
        '''
        self.current = value
        return self.current

    def store(self):
        '''
        Copy current into memory.
        '''
        self.memory = self.current
        return self.memory

    def recall(self):
        '''
        Copy memory into current.
        '''
        self.current = self.memory
        return self.current

    def __repr__(self):
        return '{}(current={!r}, memory={!r})'.format(type(self).__name__,
                                                    self.current,
                                                    self.memory)
