"""Provides :class:`EditorBridge`, which lets the user change text in their own editor."""

import logging
import os
import os.path
import tempfile
from typing import List, Optional

import shortuuid

from hmm.errors import DecodeError, EditorLaunchError, TempFileCreateError, TempFileWriteError
from hmm.process import ProcessRunner

logger = logging.getLogger(__name__)


class EditorBridge:
    """Stages text in a scratch file, opens the editor on it, and reads back the result.

    Each call to :meth:`edit` uses a freshly named scratch file, so two sessions running at once do not
    clobber each other's work.

    .. attribute:: command
       :type: List[str]

       The editor program and any arguments; the scratch file path is appended as the last argument.
    """

    def __init__(self, command: List[str], runner: ProcessRunner, scratch_dir: Optional[str] = None):
        if not command:
            raise ValueError('Editor command must be non-empty.')
        self.command = command
        self.runner = runner
        self.scratch_dir = scratch_dir

    def scratch_path(self) -> str:
        """Returns a new, unused path for a scratch file."""
        scratch_dir = self.scratch_dir or tempfile.gettempdir()
        return os.path.join(scratch_dir, f'hmm-{shortuuid.uuid()}.md')

    def _create(self, content: str) -> str:
        path = self.scratch_path()
        try:
            file = open(path, 'x', encoding='utf-8')
        except OSError as ex:
            raise TempFileCreateError(ex) from ex
        with file:
            try:
                file.write(content if content.endswith('\n') else content + '\n')
            except OSError as ex:
                raise TempFileWriteError(ex) from ex
        return path

    def edit(self, content: str) -> str:
        """Returns the content as the user left it when they closed the editor.

        The content is newline-terminated before the editor sees it.

        Raises :exc:`hmm.errors.EditorLaunchError` if the editor cannot be started or exits with a nonzero status.
        The scratch file is deleted whether or not editing succeeded, except when the editor saved text that is
        not valid UTF-8: then :exc:`hmm.errors.DecodeError` is raised and the file is kept so the edit is not lost.
        """
        path = self._create(content)
        keep = False
        try:
            args = self.command + [path]
            try:
                result = self.runner.run(args)
            except OSError as ex:
                raise EditorLaunchError(self.command, str(ex)) from ex
            if not result.ok:
                raise EditorLaunchError(self.command, f'exit status {result.returncode}')
            with open(path, 'r', encoding='utf-8') as file:
                try:
                    return file.read()
                except UnicodeDecodeError as ex:
                    keep = True
                    logger.error('keeping your edit at %s', path)
                    raise DecodeError(path, ex) from ex
        finally:
            if not keep:
                try:
                    os.remove(path)
                except FileNotFoundError:
                    logger.debug('scratch file already gone: %s', path)
