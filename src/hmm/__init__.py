"""Keeps your own "man page" notes for shell commands, as a directory of markdown files.

If you installed via ``pip``, run ``hmm -h`` to get help.

To use the Python API, look at :class:`hmm.api.Hmm`
"""
