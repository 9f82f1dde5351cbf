from .base import DeserializeFunc, Format, FunctionFormat, SerializeFunc
from .json_format import JsonFormat
from .toml_format import TomlFormat
from .yaml_format import YamlFormat

__all__ = [
    "Format",
    "FunctionFormat",
    "SerializeFunc",
    "DeserializeFunc",
    "JsonFormat",
    "YamlFormat",
    "TomlFormat",
]
