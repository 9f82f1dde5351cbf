"""Load-or-create and save for configuration files.

``ConfigStore.load`` and ``ConfigStore.save`` pick the format from the file
extension. An extension with no registered format raises
``UnknownFormatError``, a ``FatalError`` that signals caller misuse and is
not a ``StoreError``. Every other failure is a ``StoreError``.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Optional, TypeVar

from .config import DEFAULTS
from .errors import MarshalError, ReadError, StoreError, UnmarshalError, WriteError
from .formats import DeserializeFunc, Format, SerializeFunc
from .registry import FormatRegistry, extension
from .utils.io import ensure_parent, read_bytes, write_bytes

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_with(path: str | os.PathLike, target: T, deserialize: DeserializeFunc, serialize: SerializeFunc) -> T:
    """Load ``path`` into ``target`` using explicit functions.

    If the file cannot be read it is created from ``target`` as it stands and
    ``target`` is returned unchanged. If that also fails, ``ReadError`` is
    raised with the read failure as its cause and the save failure in
    ``save_error``.
    """
    try:
        data = read_bytes(path)
    except OSError as read_err:
        logger.debug("Cannot read %s (%s); creating it from defaults", path, read_err)
        try:
            save_with(path, target, serialize)
        except StoreError as save_err:
            raise ReadError(path, read_err, save_error=save_err) from read_err
        return target

    try:
        deserialize(data, target)
    except Exception as exc:
        raise UnmarshalError(path, exc) from exc
    logger.debug("Loaded %s", path)
    return target


def save_with(path: str | os.PathLike, value: Any, serialize: SerializeFunc) -> None:
    """Write ``value`` to ``path`` using an explicit serializer."""
    try:
        data = serialize(value)
    except Exception as exc:
        raise MarshalError(path, exc) from exc
    if isinstance(data, str):
        data = data.encode(DEFAULTS.encoding)
    elif isinstance(data, bytearray):
        data = bytes(data)
    elif not isinstance(data, bytes):
        raise MarshalError(path, TypeError(f"serializer returned {type(data).__name__}, expected bytes or str"))

    try:
        ensure_parent(path, DEFAULTS.dir_mode)
    except OSError as exc:
        raise WriteError(f"confstore: failed to create directory for {os.fspath(path)}: {exc}", path) from exc

    try:
        write_bytes(path, data + DEFAULTS.trailing_newline)
    except OSError as exc:
        raise WriteError(f"confstore: failed to write {os.fspath(path)}: {exc}", path) from exc
    logger.debug("Saved %s (%d bytes)", path, len(data) + len(DEFAULTS.trailing_newline))


class ConfigStore:
    """Loads and saves configuration files through a ``FormatRegistry``."""

    def __init__(self, registry: Optional[FormatRegistry] = None) -> None:
        self.registry = registry if registry is not None else FormatRegistry.with_defaults()

    def register(self, extension: str, serialize: SerializeFunc, deserialize: DeserializeFunc) -> None:
        self.registry.register(extension, serialize, deserialize)

    def register_format(self, extension: str, fmt: Format) -> None:
        self.registry.register_format(extension, fmt)

    def load(self, path: str | os.PathLike, target: T) -> T:
        fmt = self.registry.resolve(path)
        return load_with(path, target, fmt.deserialize, fmt.serialize)

    def save(self, path: str | os.PathLike, value: Any) -> None:
        fmt = self.registry.resolve(path)
        save_with(path, value, fmt.serialize)


__all__ = ["ConfigStore", "load_with", "save_with", "extension"]
