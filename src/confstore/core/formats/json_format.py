"""JSON format."""
from __future__ import annotations

import json
from typing import Any

from ..codec import populate, to_plain
from ..config import DEFAULTS


class JsonFormat:
    def __init__(self, indent: int | None = DEFAULTS.json_indent) -> None:
        self.indent = indent

    def serialize(self, value: Any) -> bytes:
        return json.dumps(to_plain(value), indent=self.indent, ensure_ascii=False).encode(DEFAULTS.encoding)

    def deserialize(self, data: bytes, target: Any) -> None:
        decoded = json.loads(data.decode(DEFAULTS.encoding))
        # A top-level null leaves the target untouched.
        if decoded is None:
            return
        populate(target, decoded)
