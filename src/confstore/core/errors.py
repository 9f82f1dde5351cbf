"""Core exception hierarchy.

Everything derived from :class:`StoreError` is recoverable and is raised to the
caller for inspection. :class:`FatalError` marks misuse (an unregistered file
extension) and is intentionally kept outside that hierarchy.
"""
from __future__ import annotations

import os


class StoreError(Exception):
    """Base class for recoverable confstore errors."""

    def __init__(self, message: str, path: str | os.PathLike | None = None) -> None:
        super().__init__(message)
        self.path = os.fspath(path) if path is not None else None


class MarshalError(StoreError):
    """Serializing a value failed."""

    def __init__(self, path: str | os.PathLike, cause: BaseException) -> None:
        super().__init__(f"confstore: failed to marshal {os.fspath(path)}: {cause}", path)


class UnmarshalError(StoreError):
    """Deserializing file content failed."""

    def __init__(self, path: str | os.PathLike, cause: BaseException) -> None:
        super().__init__(f"confstore: failed to unmarshal {os.fspath(path)}: {cause}", path)


class WriteError(StoreError):
    """Creating the parent directory or writing the file failed."""


class ReadError(StoreError):
    """Reading a file failed and creating it from the default failed too."""

    def __init__(
        self,
        path: str | os.PathLike,
        cause: BaseException,
        save_error: StoreError | None = None,
    ) -> None:
        super().__init__(f"confstore: failed to read {os.fspath(path)}: {cause}", path)
        self.save_error = save_error


class DurationParseError(ValueError):
    """Duration text does not match the duration grammar."""


class FatalError(Exception):
    """Unrecoverable usage error. Not a StoreError."""


class UnknownFormatError(FatalError):
    """No format is registered for the path's extension."""

    def __init__(self, path: str | os.PathLike, extension: str) -> None:
        super().__init__(f"confstore: unknown configuration format {extension!r} for {os.fspath(path)}")
        self.path = os.fspath(path)
        self.extension = extension
