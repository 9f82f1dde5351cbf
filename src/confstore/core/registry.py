"""Format registry keyed by file extension."""
from __future__ import annotations

import logging
import os
from typing import Dict, Iterator, List, Mapping, Optional

from .config import BUILTIN_EXTENSIONS
from .errors import UnknownFormatError
from .formats import DeserializeFunc, Format, FunctionFormat, JsonFormat, SerializeFunc, TomlFormat, YamlFormat

logger = logging.getLogger(__name__)

_BUILTIN_FORMATS = {"json": JsonFormat, "yaml": YamlFormat, "yml": YamlFormat, "toml": TomlFormat}


def extension(path: str | os.PathLike) -> str:
    """Return everything after the last ``.`` in ``path``, or ``""``."""
    text = os.fspath(path)
    index = text.rfind(".")
    if index < 0:
        return ""
    return text[index + 1 :]


class FormatRegistry:
    """Mutable extension -> ``Format`` mapping.

    Not synchronized: register formats before sharing the registry between
    threads.
    """

    def __init__(self, formats: Optional[Mapping[str, Format]] = None) -> None:
        self._formats: Dict[str, Format] = dict(formats or {})

    @classmethod
    def with_defaults(cls) -> "FormatRegistry":
        registry = cls()
        for ext in BUILTIN_EXTENSIONS:
            registry.register_format(ext, _BUILTIN_FORMATS[ext]())
        return registry

    def register(self, extension: str, serialize: SerializeFunc, deserialize: DeserializeFunc) -> None:
        self.register_format(extension, FunctionFormat(serialize, deserialize))

    def register_format(self, extension: str, fmt: Format) -> None:
        if extension in self._formats:
            logger.debug("Replacing format for .%s", extension)
        self._formats[extension] = fmt

    def lookup(self, extension: str) -> Optional[Format]:
        return self._formats.get(extension)

    def resolve(self, path: str | os.PathLike) -> Format:
        ext = extension(path)
        fmt = self.lookup(ext)
        if fmt is None:
            raise UnknownFormatError(path, ext)
        return fmt

    def extensions(self) -> List[str]:
        return sorted(self._formats)

    def __contains__(self, extension: object) -> bool:
        return extension in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self.extensions())

    def __len__(self) -> int:
        return len(self._formats)
