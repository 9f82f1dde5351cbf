"""Core of confstore (formats, registry, load/save)."""

from . import config, errors

__all__ = ["config", "errors"]
