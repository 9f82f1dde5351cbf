"""Format abstraction."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from ..config import DEFAULTS

SerializeFunc = Callable[[Any], "bytes | str"]
DeserializeFunc = Callable[[bytes, Any], Any]


class Format(Protocol):
    def serialize(self, value: Any) -> bytes:
        ...

    def deserialize(self, data: bytes, target: Any) -> None:
        ...


class FunctionFormat:
    """Adapts a plain serialize/deserialize function pair to ``Format``."""

    def __init__(self, serialize: SerializeFunc, deserialize: DeserializeFunc) -> None:
        self._serialize = serialize
        self._deserialize = deserialize

    def serialize(self, value: Any) -> bytes:
        data = self._serialize(value)
        if isinstance(data, str):
            return data.encode(DEFAULTS.encoding)
        return data

    def deserialize(self, data: bytes, target: Any) -> None:
        self._deserialize(data, target)

    def __repr__(self) -> str:
        name = getattr(self._serialize, "__qualname__", repr(self._serialize))
        return f"FunctionFormat({name})"
