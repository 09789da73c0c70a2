"""Asks the user questions in the terminal."""

from typing import List, Optional

from prompt_toolkit import prompt
from prompt_toolkit.shortcuts import radiolist_dialog

from hmm.errors import PromptCancelled


class Prompter:
    def confirm(self, message: str, default: bool = True) -> bool:
        """Asks a yes/no question."""
        raise NotImplementedError()

    def select(self, message: str, choices: List[str]) -> Optional[str]:
        """Asks the user to pick one of the choices. Returns None if they back out."""
        raise NotImplementedError()


class TerminalPrompter(Prompter):
    """Implements prompts with prompt_toolkit.

    Pressing Ctrl-C or Ctrl-D at a question raises :exc:`hmm.errors.PromptCancelled`.

    :meth:`confirm` is built on ``prompt`` rather than ``prompt_toolkit.shortcuts.confirm``, because the latter
    has no default answer for an empty reply.
    """

    def confirm(self, message: str, default: bool = True) -> bool:
        suffix = ' [Y/n] ' if default else ' [y/N] '
        while True:
            try:
                answer = prompt(message + suffix).strip().lower()
            except (KeyboardInterrupt, EOFError) as ex:
                raise PromptCancelled() from ex
            if not answer:
                return default
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False

    def select(self, message: str, choices: List[str]) -> Optional[str]:
        dialog = radiolist_dialog(title='hmm', text=message, values=[(c, c) for c in choices])
        try:
            return dialog.run()
        except (KeyboardInterrupt, EOFError) as ex:
            raise PromptCancelled() from ex
