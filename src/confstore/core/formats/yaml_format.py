"""YAML format (safe loader/dumper only)."""
from __future__ import annotations

from typing import Any

import yaml

from ..codec import populate, to_plain
from ..config import DEFAULTS


class YamlFormat:
    def serialize(self, value: Any) -> bytes:
        text = yaml.safe_dump(to_plain(value), sort_keys=False, allow_unicode=True)
        return text.encode(DEFAULTS.encoding)

    def deserialize(self, data: bytes, target: Any) -> None:
        decoded = yaml.safe_load(data.decode(DEFAULTS.encoding))
        # An empty document leaves the target untouched.
        if decoded is None:
            return
        populate(target, decoded)
