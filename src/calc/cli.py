from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser
import logging

from prompt_toolkit import PromptSession

from .session import Session


log = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Line editing terminal input, for when a human is at the keyboard.
    '''

    def __init__(self, vi_mode=False):
        self.session = PromptSession(vi_mode=vi_mode,
                                     enable_suspend=True,
                                     # Nothing persisted across runs.
                                     history=None,
                                     mouse_support=False,
                                     # Certainly not! But be explicit.
                                     erase_when_done=False)

    def readline(self, prompt):
        '''
        Prompt for and return one line. Raises EOFError on ^D.
        '''
        return self.session.prompt(prompt)


class PlainInput:
    '''
    Line input from any text stream, prompting on another.
    '''

    def __init__(self, stream=None, output=None):
        self.stream = stdin if stream is None else stream
        self.output = stdout if output is None else output

    def readline(self, prompt):
        '''
        Prompt for and return one line, without its line ending.

        Raises EOFError once the stream is exhausted.
        '''
        print(prompt, end='', flush=True, file=self.output)
        line = self.stream.readline()
        if not line:
            raise EOFError
        return line.rstrip('\r\n')


class CLI:
    '''
    Command line interface to the calculator.
    '''

    def _terminal(self):
        '''
        Return line editing input if asked for, or if both stdin/out are a
        tty, unless batch input was asked for.
        '''
        if self.args.interactive is None:
            interactive = isatty(stdin.fileno()) and isatty(stdout.fileno())
        else:
            interactive = self.args.interactive
        log.debug('Line editing %s', 'on' if interactive else 'off')
        if interactive:
            return InteractiveInput(vi_mode=self.args.vi)
        return PlainInput()

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Basic and RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log diagnostics to stderr')
        self.argument_parser.add_argument('--vi',
                                          action='store_true',
                                          help='vi key bindings')
        input_groups = self.argument_parser.add_mutually_exclusive_group()
        input_groups.add_argument('-i', '--interactive',
                                  action='store_const',
                                  const=True,
                                  help='force line editing')
        input_groups.add_argument('-b', '--batch',
                                  action='store_const',
                                  const=False,
                                  dest='interactive',
                                  help='force plain line reads')
        self.argument_parser.set_defaults(interactive=None)

    def run(self, *, args=None, terminal=None, output=None):
        '''
        Run CLI, given these args, or the process's CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s',
            stream=stderr)
        if terminal is None:
            terminal = self._terminal()
        session = Session(terminal, output=output)
        try:
            session.run()
        except KeyboardInterrupt:
            exit(1)
        return session
