"""confstore: load-or-create and save configuration files as JSON, YAML or TOML."""

from .core.duration import Duration
from .core.errors import (
    DurationParseError,
    FatalError,
    MarshalError,
    ReadError,
    StoreError,
    UnknownFormatError,
    UnmarshalError,
    WriteError,
)
from .core.formats import Format, FunctionFormat, JsonFormat, TomlFormat, YamlFormat
from .core.registry import FormatRegistry, extension
from .core.store import ConfigStore, load_with, save_with

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "FormatRegistry",
    "Format",
    "FunctionFormat",
    "JsonFormat",
    "YamlFormat",
    "TomlFormat",
    "load_with",
    "save_with",
    "extension",
    "Duration",
    "StoreError",
    "MarshalError",
    "UnmarshalError",
    "ReadError",
    "WriteError",
    "DurationParseError",
    "FatalError",
    "UnknownFormatError",
]
