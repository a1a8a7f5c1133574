"""Exceptions raised by file system operations."""


class FileSystemError(Exception):
    """Base class for every file system error.

    The text of the error is the class prefix, followed by ": " and the
    detail message when one is given.
    """

    prefix = "File system error"

    def __init__(self, message: str = "") -> None:
        self.detail = message
        text = self.prefix if not message else f"{self.prefix}: {message}"
        super().__init__(text)


class FileNotFoundInPartitionError(FileSystemError):
    """A file does not exist."""

    prefix = "File not found"


class NotEnoughSpaceError(FileSystemError):
    """A partition lacks the space an operation needs."""

    prefix = "Not enough space"


class FileIsOpenError(FileSystemError):
    """An operation is not permitted because a file is open."""

    prefix = "Operation not permitted on an opened file"


class DirectoryAlreadyExistsError(FileSystemError):
    """A directory already exists."""

    prefix = "Directory already exists"


class DirectoryDoesNotExistError(FileSystemError):
    """A directory does not exist."""

    prefix = "Directory does not exist"


class TooManyOpenFilesError(FileSystemError):
    """The limit on open files has been reached."""

    prefix = "Too many open files"


class FileAlreadyExistsError(FileSystemError):
    """A file already exists."""

    prefix = "File already exists"


class InvalidSeekError(FileSystemError):
    """A seek goes to an invalid position."""

    prefix = "Invalid seek"


class InvalidMoveError(FileSystemError):
    """A move cannot be performed."""

    prefix = "Invalid move"


class InvalidTruncateError(FileSystemError):
    """A truncation cannot be performed."""

    prefix = "Invalid truncate"


class InvalidPathError(FileSystemError):
    """A path is not valid."""

    prefix = "Invalid path"