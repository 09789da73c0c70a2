"""Defines classes for representing entries, dispatch modes, and health-check results.

The most important class is :class:`Entries`, the in-memory collection of notes for one run of the tool.
"""

from __future__ import annotations
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional


class Entries(MutableMapping):
    """The collection of notes, mapping each command name to the markdown content of its note.

    Iteration (and therefore :meth:`keys`, :meth:`items`, etc.) is always in lexicographic order of the names,
    so interactive selection lists come out the same every time.

    Names are case-sensitive.
    """

    def __init__(self, items: Optional[Mapping[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def __getitem__(self, name: str) -> str:
        return self._items[name]

    def __setitem__(self, name: str, content: str) -> None:
        self._items[name] = content

    def __delitem__(self, name: str) -> None:
        del self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'Entries({dict(self.items())!r})'

    def names(self) -> List[str]:
        """Returns the sorted list of entry names."""
        return list(self)


class Mode(Enum):
    """The mutually exclusive things a single invocation of the tool can do."""

    EDIT = 'edit'
    """Open an existing entry in the editor."""

    VIEW_OR_CREATE = 'view'
    """Show an entry, or offer to create it if it doesn't exist."""

    SELECT = 'select'
    """Pick an entry from a list, then show it."""

    HEALTH_CHECK = 'health-check'
    """Report whether the external tools are installed."""

    NONE = 'none'
    """Do nothing beyond loading the entries."""

    @classmethod
    def resolve(cls, cmd: Optional[str], edit: bool = False, interactive: bool = False,
                health_check: bool = False) -> Mode:
        """Decides which mode applies.

        A command name takes precedence over the other flags: with ``edit`` set it selects :attr:`EDIT`,
        otherwise :attr:`VIEW_OR_CREATE`. Without a command name, ``interactive`` is checked before
        ``health_check``.
        """
        if cmd is not None:
            return cls.EDIT if edit else cls.VIEW_OR_CREATE
        if interactive:
            return cls.SELECT
        if health_check:
            return cls.HEALTH_CHECK
        return cls.NONE


@dataclass
class ToolStatus:
    """Whether an external program needed by hmm could be found."""

    tool: str
    """The program name that was looked up."""

    path: Optional[str] = None
    """Where the program was found on the search path, or None if it is missing."""

    @property
    def ok(self) -> bool:
        return self.path is not None

    def describe(self) -> str:
        return f'ok ({self.path})' if self.ok else 'missing'
