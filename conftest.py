# Ensure src/ is on sys.path for tests
import io, sys, pathlib
root = pathlib.Path(__file__).resolve().parent / "src"
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest
from prompter.ui.input import Prompter
from prompter.ui.streams import ScriptedReader

class Session:
    """A prompter fed from a list of lines, with everything it wrote kept in ``out``."""

    def __init__(self, *lines: str, **prompter_kw):
        self.reader = ScriptedReader(lines)
        self.out = io.StringIO()
        self.prompter = Prompter(self.reader, self.out, **prompter_kw)

    @property
    def output(self) -> str:
        return self.out.getvalue()

@pytest.fixture
def scripted():
    return Session
