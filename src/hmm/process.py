"""Runs the external programs hmm depends on (editor, renderer, pager).

Everything else in hmm goes through a :class:`ProcessRunner`, so tests can substitute a fake one.
"""

from dataclasses import dataclass
import logging
import shutil
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    def run(self, args: List[str], input: Optional[str] = None) -> ProcessResult:
        """Runs the program and blocks until it exits.

        If input is given, it is written to the program's standard input; otherwise standard input,
        output and error are all inherited from this process, so the program can use the terminal.

        Raises :exc:`OSError` if the program cannot be started.
        """
        raise NotImplementedError()

    def which(self, name: str) -> Optional[str]:
        """Returns the path of the named executable on the search path, or None."""
        raise NotImplementedError()


class SubprocessRunner(ProcessRunner):
    def run(self, args: List[str], input: Optional[str] = None) -> ProcessResult:
        logger.debug('running: %s', args)
        completed = subprocess.run(args, input=input, text=True if input is not None else None)
        return ProcessResult(completed.returncode)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)
