"""IO helpers."""
from __future__ import annotations

import os
from pathlib import Path

from ..config import DEFAULTS


def read_bytes(path: str | os.PathLike) -> bytes:
    return Path(path).read_bytes()


def ensure_parent(path: str | os.PathLike, mode: int = DEFAULTS.dir_mode) -> None:
    """Create every missing parent directory of ``path``."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, mode=mode, exist_ok=True)


def write_bytes(path: str | os.PathLike, data: bytes) -> None:
    # Truncates in place; a crash mid-write can leave a partial file.
    Path(path).write_bytes(data)
