"""
MARK - Error Types
==================
Validation problems are reported to the user and abort the command.
Storage problems are fatal for the invocation.
"""


class MarkError(Exception):
    """Base class for every error raised by mark"""


class ValidationError(MarkError):
    """Bad user input: negative priority, unknown index, missing argument"""


class StorageError(MarkError):
    """A task file could not be read or written"""


class MalformedLineError(StorageError):
    """A stored line does not decode to '<priority> <text>'"""

    def __init__(self, line: str, path=None, lineno=None):
        self.line = line
        self.path = path
        self.lineno = lineno
        where = f"{path}:{lineno}: " if path is not None else ""
        super().__init__(f"{where}malformed task line {line!r}")
