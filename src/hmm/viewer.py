"""Provides :class:`ViewerBridge`, which shows an entry in the terminal."""

import logging
from typing import List

from hmm.process import ProcessRunner

logger = logging.getLogger(__name__)


class ViewerBridge:
    """Pipes markdown into a renderer such as glow, falling back to a plain pager such as less.

    Displaying is best-effort: failures are logged, never raised.
    """

    def __init__(self, renderer: List[str], pager: List[str], runner: ProcessRunner):
        self.renderer = renderer
        self.pager = pager
        self.runner = runner

    def _pipe(self, command: List[str], content: str) -> None:
        result = self.runner.run(command, input=content)
        if not result.ok:
            raise RuntimeError(f'{command[0]} exited with status {result.returncode}')

    def present(self, content: str) -> bool:
        """Displays the content, returning False if neither the renderer nor the pager worked."""
        try:
            self._pipe(self.renderer, content)
            return True
        except (OSError, RuntimeError) as ex:
            logger.debug('failed to display entry using %s, try running --health-check: %s', self.renderer[0], ex)
        try:
            self._pipe(self.pager, content)
            return True
        except (OSError, RuntimeError) as ex:
            logger.error('failed to display entry: %s', ex)
            return False
