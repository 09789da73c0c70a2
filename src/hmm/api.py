"""Provides the main entry point for using the library, :class:`Hmm`"""

from __future__ import annotations
import logging
from typing import List, Optional

from mako.template import Template

from hmm.conf import HmmConf
from hmm.editor import EditorBridge
from hmm.models import Entries, Mode, ToolStatus
from hmm.process import ProcessRunner, SubprocessRunner
from hmm.prompts import Prompter, TerminalPrompter
from hmm.store import EntryStore
from hmm.viewer import ViewerBridge

logger = logging.getLogger(__name__)


class Hmm:
    """Ties together the entry store, the editor, the viewer and the prompts.

    Generally, you should get an instance using :meth:`Hmm.for_user`. Each operation takes the
    :class:`hmm.models.Entries` collection to work on, as returned by :meth:`load`; operations that change the
    collection also save it.

    .. attribute:: conf
       :type: hmm.conf.HmmConf

    .. attribute:: store
       :type: hmm.store.EntryStore

    Here's an example that appends a line to every entry:

    .. code-block:: python

       from hmm.api import Hmm
       hmm = Hmm.for_user()
       entries = hmm.load()
       for name in entries:
           entries[name] += '\\nreviewed\\n'
       hmm.store.save(entries)
    """

    @staticmethod
    def for_user() -> Hmm:
        """Creates an instance configured by :meth:`hmm.conf.HmmConf.for_user`."""
        return HmmConf.for_user().instantiate()

    def __init__(self, conf: HmmConf, runner: ProcessRunner = None, prompter: Prompter = None):
        self.conf = conf
        self.runner = runner or SubprocessRunner()
        self.prompter = prompter or TerminalPrompter()
        self.store = EntryStore(conf.entries_dir, conf.extension)
        self.editor = EditorBridge(conf.editor, self.runner, conf.scratch_dir)
        self.viewer = ViewerBridge(conf.renderer, conf.pager, self.runner)

    def load(self) -> Entries:
        return self.store.load()

    def seed(self, name: str) -> str:
        """Returns the starting content for a new entry, rendered from :attr:`hmm.conf.HmmConf.seed_template`."""
        return Template(text=self.conf.seed_template).render(name=name)

    def edit_existing(self, entries: Entries, name: str) -> bool:
        """Opens the named entry in the editor and saves the result.

        Does nothing if there is no such entry; unlike :meth:`view_or_create`, this never creates one.
        Returns True if the entry was edited.
        """
        if name not in entries:
            logger.info("no entry for '%s', nothing to edit", name)
            return False
        logger.debug("editing '%s'", name)
        entries[name] = self.editor.edit(entries[name])
        self.store.save(entries)
        return True

    def view_or_create(self, entries: Entries, name: str) -> bool:
        """Shows the named entry, or if there isn't one, asks whether to create it.

        A new entry starts out as :meth:`seed` and is opened in the editor before being saved.
        Returns True if an entry was created.
        """
        if name in entries:
            self.viewer.present(entries[name])
            return False
        # raises for names that could never be saved, before bothering the user
        self.store.path_for(name)
        if not self.prompter.confirm(f"No entry for '{name}'! Create one?", default=True):
            return False
        entries[name] = self.editor.edit(self.seed(name))
        self.store.save(entries)
        return True

    def select(self, entries: Entries) -> Optional[str]:
        """Lets the user pick an entry from a list and shows it. Returns the chosen name, if any."""
        if not entries:
            logger.info('no entries yet; create one with `hmm <command>`')
            return None
        name = self.prompter.select('Which Command', entries.names())
        if name is None:
            return None
        self.viewer.present(entries[name])
        return name

    def health_check(self) -> List[ToolStatus]:
        """Looks up the renderer, pager and editor programs on the search path."""
        tools = [self.conf.renderer[0], self.conf.pager[0], self.conf.editor[0]]
        return [ToolStatus(tool, self.runner.which(tool)) for tool in tools]

    def dispatch(self, entries: Entries, mode: Mode, name: str = None):
        """Performs the operation for the given mode.

        Returns the list of :class:`hmm.models.ToolStatus` for :attr:`hmm.models.Mode.HEALTH_CHECK`, otherwise
        the return value of the corresponding method.
        """
        logger.debug('dispatching %s (%s)', mode.value, name)
        if mode == Mode.EDIT:
            return self.edit_existing(entries, name)
        if mode == Mode.VIEW_OR_CREATE:
            return self.view_or_create(entries, name)
        if mode == Mode.SELECT:
            return self.select(entries)
        if mode == Mode.HEALTH_CHECK:
            return self.health_check()
        return None
