"""TOML format.

Reading uses ``tomllib`` (``tomli`` before Python 3.11); writing uses
``tomli_w``. TOML has no null, so ``None`` values cannot be saved.
"""
from __future__ import annotations

from typing import Any

import tomli_w

from ..codec import populate, to_plain
from ..config import DEFAULTS

try:  # Python 3.10 compatibility
    import tomllib  # type: ignore
except ImportError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


class TomlFormat:
    def serialize(self, value: Any) -> bytes:
        plain = to_plain(value)
        if not isinstance(plain, dict):
            raise TypeError(f"TOML documents must be tables, got {type(plain).__name__}")
        return tomli_w.dumps(plain).encode(DEFAULTS.encoding)

    def deserialize(self, data: bytes, target: Any) -> None:
        populate(target, tomllib.loads(data.decode(DEFAULTS.encoding)))
