"""Provides the :class:`EntryStore` class, which reads and writes the directory of entry files."""

import logging
import os
import os.path

from hmm.errors import DecodeError, InvalidEntryName
from hmm.models import Entries

logger = logging.getLogger(__name__)


class EntryStore:
    """Keeps each entry as a file named ``<name>.<extension>`` directly inside one directory.

    .. attribute:: entries_dir
       :type: str

    .. attribute:: extension
       :type: str

       Without the leading period.
    """

    def __init__(self, entries_dir: str, extension: str = 'md'):
        self.entries_dir = entries_dir
        self.extension = extension

    def ensure_dir(self) -> str:
        """Creates the entries directory (and its parents) if it does not exist yet, and returns its path."""
        if not os.path.isdir(self.entries_dir):
            logger.debug('creating entries directory %s', self.entries_dir)
            os.makedirs(self.entries_dir, exist_ok=True)
        return self.entries_dir

    def path_for(self, name: str) -> str:
        """Returns the path of the file that holds the named entry.

        Raises :exc:`hmm.errors.InvalidEntryName` if the name could not be a file name on its own.
        """
        if (not name or name in ('.', '..') or os.sep in name
                or (os.altsep and os.altsep in name) or '\0' in name):
            raise InvalidEntryName(name)
        return os.path.join(self.entries_dir, f'{name}.{self.extension}')

    def load(self) -> Entries:
        """Reads every entry file in the directory.

        Only regular files whose extension matches :attr:`extension` are loaded; everything else, including
        files with no extension at all, is silently skipped. Subdirectories are not searched.

        :exc:`OSError` propagates if the directory or one of the files cannot be read, and
        :exc:`hmm.errors.DecodeError` is raised for a file that is not valid UTF-8.
        """
        suffix = f'.{self.extension}'
        entries = Entries()
        for dir_entry in os.scandir(self.ensure_dir()):
            if not dir_entry.is_file():
                continue
            stem, ext = os.path.splitext(dir_entry.name)
            if not ext == suffix:
                continue
            with open(dir_entry.path, 'r', encoding='utf-8') as file:
                try:
                    entries[stem] = file.read()
                except UnicodeDecodeError as ex:
                    raise DecodeError(dir_entry.path, ex) from ex
            logger.debug('loaded: %s', dir_entry.path)
        return entries

    def save(self, entries: Entries) -> None:
        """Writes every entry in the collection to its file, overwriting what was there.

        Files belonging to names that are not in the collection are left alone.
        """
        self.ensure_dir()
        for name, content in entries.items():
            path = self.path_for(name)
            logger.debug('saving: %s (%s)', name, path)
            with open(path, 'w', encoding='utf-8') as file:
                file.write(content)
