from typing import Callable, Dict, List, Optional

import pytest

from hmm.api import Hmm
from hmm.conf import HmmConf
from hmm.process import ProcessResult, ProcessRunner
from hmm.prompts import Prompter

ENTRIES_DIR = '/config/hmm/entries'


class FakeRunner(ProcessRunner):
    """Records calls instead of starting programs.

    Programs named in `missing` fail to start; `exit_codes` sets the status for a program.
    When `edit` is set, a run without input is treated as an editor session on the last argument.
    """

    def __init__(self):
        self.calls: List[tuple] = []
        self.installed: Dict[str, str] = {}
        self.missing = set()
        self.exit_codes: Dict[str, int] = {}
        self.edit: Optional[Callable[[str], str]] = None
        self.seen_by_editor: List[str] = []

    def run(self, args, input=None):
        self.calls.append((list(args), input))
        if args[0] in self.missing:
            raise FileNotFoundError(f'No such file or directory: {args[0]!r}')
        if input is None and self.edit:
            path = args[-1]
            with open(path, 'r', encoding='utf-8') as file:
                before = file.read()
            self.seen_by_editor.append(before)
            with open(path, 'w', encoding='utf-8') as file:
                file.write(self.edit(before))
        return ProcessResult(self.exit_codes.get(args[0], 0))

    def which(self, name):
        return self.installed.get(name)

    def programs(self) -> List[str]:
        return [args[0] for args, _ in self.calls]


class FakePrompter(Prompter):
    def __init__(self, answer: bool = True, selection: Optional[str] = None):
        self.answer = answer
        self.selection = selection
        self.confirmations = []
        self.selections = []

    def confirm(self, message, default=True):
        self.confirmations.append(message)
        return self.answer

    def select(self, message, choices):
        self.selections.append(list(choices))
        return self.selection


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def hmm(fs, runner, prompter):
    conf = HmmConf(entries_dir=ENTRIES_DIR)
    return Hmm(conf, runner=runner, prompter=prompter)
