from __future__ import annotations
from dataclasses import dataclass, field
import os
import os.path
import shlex
from typing import List, Mapping, Optional, Union

import yaml

from hmm.errors import ConfError

DEFAULT_EDITOR = 'vi'
DEFAULT_RENDERER = ['glow', '-p', '-']
DEFAULT_PAGER = ['less', '-r', '-']
DEFAULT_SEED_TEMPLATE = '# ${name}'

CONFIG_FILENAME = 'config.yml'
TEMPLATE_FILENAME = 'template.md.mako'


def config_root(environ: Mapping[str, str] = None) -> str:
    """Returns ``$XDG_CONFIG_HOME``, or ``~/.config`` if that is unset or empty."""
    environ = os.environ if environ is None else environ
    root = environ.get('XDG_CONFIG_HOME')
    if root:
        return root
    return os.path.join(os.path.expanduser('~'), '.config')


def parse_command(value: Union[str, List[str]], key: str) -> List[str]:
    """Turns a config value into an argv list.

    Strings are split the way a shell would, so ``code --wait`` becomes ``['code', '--wait']``.
    """
    if isinstance(value, str):
        try:
            args = shlex.split(value)
        except ValueError as ex:
            raise ConfError(f'`{key}` could not be parsed: {ex}') from ex
    elif isinstance(value, list) and all(isinstance(a, str) for a in value):
        args = list(value)
    else:
        raise ConfError(f'`{key}` must be a string or a list of strings, not: {value!r}')
    if not args:
        raise ConfError(f'`{key}` must not be empty')
    return args


@dataclass
class HmmConf:
    entries_dir: str
    """The directory holding one ``<name>.md`` file per entry. Created when first needed."""

    editor: List[str] = field(default_factory=lambda: [DEFAULT_EDITOR])
    """Editor command; the path of the file to edit is appended."""

    renderer: List[str] = field(default_factory=lambda: list(DEFAULT_RENDERER))
    """Preferred viewer. Must read markdown from standard input."""

    pager: List[str] = field(default_factory=lambda: list(DEFAULT_PAGER))
    """Fallback viewer, used when the renderer fails. Must read from standard input."""

    extension: str = 'md'

    seed_template: str = DEFAULT_SEED_TEMPLATE
    """Mako template for the content of a newly created entry. The variable ``name`` is defined."""

    scratch_dir: Optional[str] = None
    """Where scratch files for editing are written. Defaults to the system temp directory."""

    @classmethod
    def for_user(cls, environ: Mapping[str, str] = None) -> HmmConf:
        """Builds the configuration from the environment and the user's config directory.

        Everything lives under ``$XDG_CONFIG_HOME/hmm`` (see :func:`config_root`):

        * ``entries/`` holds the notes
        * ``config.yml``, if present, can set ``editor``, ``renderer``, ``pager`` and ``entries_dir``
        * ``template.md.mako``, if present, replaces the template for new entries

        The editor defaults to ``$EDITOR``, then ``vi``; a setting in ``config.yml`` wins over both.

        Raises :exc:`hmm.errors.ConfError` if ``config.yml`` is malformed.
        """
        environ = os.environ if environ is None else environ
        base = os.path.join(config_root(environ), 'hmm')
        conf = cls(entries_dir=os.path.join(base, 'entries'),
                   editor=parse_command(environ.get('EDITOR') or DEFAULT_EDITOR, 'EDITOR'))

        path = os.path.join(base, CONFIG_FILENAME)
        if os.path.isfile(path):
            conf.apply(cls._read_yaml(path), path)

        template_path = os.path.join(base, TEMPLATE_FILENAME)
        if os.path.isfile(template_path):
            with open(template_path, 'r', encoding='utf-8') as file:
                conf.seed_template = file.read()
        return conf

    @staticmethod
    def _read_yaml(path: str) -> dict:
        with open(path, 'r', encoding='utf-8') as file:
            try:
                data = yaml.safe_load(file)
            except yaml.YAMLError as ex:
                raise ConfError(f'Could not parse config file {path}: {ex}') from ex
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfError(f'Config file must contain a mapping: {path}')
        return data

    def apply(self, settings: dict, source: str = 'config') -> None:
        """Overrides fields with the values from a parsed config file."""
        unknown = set(settings) - {'editor', 'renderer', 'pager', 'entries_dir'}
        if unknown:
            raise ConfError(f'Unknown setting(s) in {source}: {", ".join(sorted(unknown))}')
        for key in ('editor', 'renderer', 'pager'):
            if key in settings:
                setattr(self, key, parse_command(settings[key], key))
        if 'entries_dir' in settings:
            value = settings['entries_dir']
            if not isinstance(value, str) or not value:
                raise ConfError(f'`entries_dir` must be a non-empty string, not: {value!r}')
            self.entries_dir = os.path.expanduser(value)

    def instantiate(self):
        from hmm.api import Hmm
        return Hmm(self)
