"""Exception types raised by hmm."""


class Error(Exception):
    """Base class for errors hmm reports to the user."""
    pass


class EditorLaunchError(Error):
    def __init__(self, command, detail=None):
        self.command = command
        msg = f'failed during launch of editor: {" ".join(command)}'
        if detail:
            msg += f' ({detail})'
        super().__init__(msg)


class TempFileCreateError(Error):
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f'failed to create temp file: {cause}')


class TempFileWriteError(Error):
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f'failed to write content to temp file: {cause}')


class NoCommandProvided(Error):
    def __init__(self):
        super().__init__('no command was provided')


class InvalidEntryName(Error):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'not a valid entry name: {name!r}')


class ConfError(Error):
    pass


class PromptCancelled(Error):
    def __init__(self):
        super().__init__('prompt was cancelled')


class DecodeError(Error):
    def __init__(self, path: str, cause: UnicodeDecodeError):
        self.path = path
        self.cause = cause
        super().__init__(f'{path} is not valid UTF-8: {cause}')
