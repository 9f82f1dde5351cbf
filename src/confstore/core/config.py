"""Core defaults (no environment reads)."""
from dataclasses import dataclass

DEFAULT_DIR_MODE = 0o777
DEFAULT_ENCODING = "utf-8"
DEFAULT_JSON_INDENT = 2
TRAILING_NEWLINE = b"\n"
BUILTIN_EXTENSIONS = ("json", "yaml", "yml", "toml")


@dataclass
class StoreDefaults:
    dir_mode: int = DEFAULT_DIR_MODE
    encoding: str = DEFAULT_ENCODING
    json_indent: int = DEFAULT_JSON_INDENT
    trailing_newline: bytes = TRAILING_NEWLINE


DEFAULTS = StoreDefaults()
