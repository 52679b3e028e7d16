"""Custom exceptions for dirscout."""

import os


class DirscoutError(Exception):
    """Base exception for dirscout."""


class _FilesystemError(DirscoutError):
    """A filesystem primitive failed for one path."""

    def __init__(self, path: str | os.PathLike, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"{os.fspath(path)}: {describe_os_error(cause)}")

    @property
    def reason(self) -> str:
        """System description of the underlying failure."""
        return describe_os_error(self.cause)


class DirectoryUnreadableError(_FilesystemError):
    """Directory cannot be opened or read (missing, not a directory, denied)."""


class MetadataUnavailableError(_FilesystemError):
    """Metadata for a single entry cannot be obtained."""


class ConfigValidationError(DirscoutError):
    """Config file is invalid or malformed."""


class ConfigVersionError(DirscoutError):
    """Config version is unsupported."""


def describe_os_error(error: OSError) -> str:
    """Return the system error description for an OSError.

    Falls back to str(error) for errors raised without an errno.
    """
    if error.strerror:
        return error.strerror
    return str(error)
