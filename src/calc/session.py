'''
Interactive session: the mode menu and the two calculator loops.
'''

from enum import Enum
from sys import stdout
import logging

from .accumulator import Accumulator
from .lexer import Lexer
from .rpn import evaluate
from .util import (CalcError, InvalidChoice, InvalidInput, InvalidNumber,
                   format_number)


log = logging.getLogger(__name__)


class Mode(Enum):
    MAIN_MENU = 'main menu'
    BASIC = 'basic'
    RPN = 'rpn'
    TERMINATED = 'terminated'


class Session:
    '''
    Menu-driven calculator session, reading lines from a terminal.

    The terminal is anything with a readline(prompt) method that returns a
    line, and raises EOFError once input is exhausted.
    '''

    MENU_PROMPT = 'Select mode (1: Basic Calculator, 2: RPN Calculator, ' \
                  '3: Exit): '
    BASIC_PROMPT = 'Enter command: '
    RPN_PROMPT = 'Enter expression: '
    BASIC_BANNER = '\n'.join([
        'Basic Calculator Mode',
        'Available commands:',
        '  number: Set current value',
        '  operator number: Perform operation (e.g., + 10)',
        '  m: Store current value to memory',
        '  r: Recall value from memory',
        '  q: Return to main menu',
    ])
    RPN_BANNER = '\n'.join([
        'RPN Calculator Mode',
        "Enter an RPN expression (e.g., '3 4 + 5 *'). "
        "Type 'q' to return to the main menu.",
    ])
    FAREWELL = 'Goodbye!'
    QUIT = 'q'

    # Menu selection to mode.
    CHOICES = {
        '1': Mode.BASIC,
        '2': Mode.RPN,
        '3': Mode.TERMINATED,
    }

    def __init__(self, terminal, output=None, accumulator=None):
        '''
        Create session at the main menu.

        :param terminal: Line source, see class docstring.
        :param output: Text stream results are printed to; stdout if None.
        :param accumulator: Basic mode state; a fresh one if None.
        '''
        self.terminal = terminal
        self.output = stdout if output is None else output
        self.accumulator = Accumulator() if accumulator is None \
            else accumulator
        self.lexer = Lexer()
        self.mode = Mode.MAIN_MENU

    def print(self, *args, **kwargs):
        print(*args, file=self.output, flush=True, **kwargs)

    def _readline(self, prompt):
        return self.terminal.readline(prompt).strip()

    def run(self):
        '''
        Run until the user exits or input runs out.
        '''
        try:
            while self.mode is not Mode.TERMINATED:
                mode = type(self).HANDLERS[self.mode](self)
                if mode is not self.mode:
                    log.debug('%s -> %s', self.mode.value, mode.value)
                self.mode = mode
        except EOFError:
            log.debug('End of input in %s', self.mode.value)
            # Finish the prompt's line.
            self.print()
            self.mode = Mode.TERMINATED
        self.print(type(self).FAREWELL)

    def choose(self, line):
        '''
        Return the mode selected by a menu line.
        '''
        try:
            return type(self).CHOICES[line.strip()]
        except KeyError:
            raise InvalidChoice() from None

    def main_menu(self):
        self.print()
        line = self._readline(type(self).MENU_PROMPT)
        try:
            return self.choose(line)
        except InvalidChoice as e:
            log.debug('Bad menu choice %r', line)
            self.print(e)
            return Mode.MAIN_MENU

    def basic_command(self, line):
        '''
        Run one basic mode command line, and return the text to show.

        :raises InvalidNumber: on an unparseable number.
        :raises InvalidInput: on a line that is no command at all.
        :raises CalcError: for failed operations.
        '''
        accumulator = self.accumulator
        if line == 'm':
            return 'Stored {} in memory'.format(
                format_number(accumulator.store()))
        elif line == 'r':
            return 'Recalled {} from memory'.format(
                format_number(accumulator.recall()))
        tokens = line.split()
        if len(tokens) == 1:
            value = accumulator.set(self.lexer.number(tokens[0]))
            return 'Current value: {}'.format(format_number(value))
        elif len(tokens) == 2:
            operator, operand = tokens
            operand = self.lexer.number(operand)
            # Only the first character names the operator: +x 5 adds 5.
            result = accumulator.apply(operator[0], operand)
            return 'Result: {}'.format(format_number(result))
        raise InvalidInput()

    def basic_mode(self):
        self.print(type(self).BASIC_BANNER)
        while True:
            line = self._readline(type(self).BASIC_PROMPT)
            if line == type(self).QUIT:
                return Mode.MAIN_MENU
            try:
                self.print(self.basic_command(line))
                log.debug('%r', self.accumulator)
            # Malformed commands, as opposed to failed operations
            except (InvalidNumber, InvalidInput) as e:
                log.debug('Bad command %r', line, exc_info=True)
                self.print(e)
            except CalcError as e:
                log.debug('Failed command %r', line, exc_info=True)
                self.print('Error:', e)

    def rpn_command(self, line):
        '''
        Evaluate one RPN expression line, and return the text to show.
        '''
        return 'Result: {}'.format(format_number(evaluate(line)))

    def rpn_mode(self):
        self.print(type(self).RPN_BANNER)
        while True:
            line = self._readline(type(self).RPN_PROMPT)
            if line == type(self).QUIT:
                return Mode.MAIN_MENU
            try:
                self.print(self.rpn_command(line))
            except CalcError as e:
                log.debug('Failed expression %r', line, exc_info=True)
                self.print('Error:', e)

    # Mode to the method running it until the next mode is known.
    HANDLERS = {
        Mode.MAIN_MENU: main_menu,
        Mode.BASIC: basic_mode,
        Mode.RPN: rpn_mode,
    }
