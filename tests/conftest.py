from io import StringIO

import pytest

from calc.cli import PlainInput
from calc.session import Session


@pytest.fixture
def run_session():
    '''
    Run a session over scripted input lines; return it and its output.
    '''
    def run(*lines, accumulator=None):
        output = StringIO()
        terminal = PlainInput(StringIO(''.join(line + '\n'
                                               for line in lines)),
                              output=output)
        session = Session(terminal, output=output, accumulator=accumulator)
        session.run()
        return session, output.getvalue()
    return run
