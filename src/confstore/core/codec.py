"""Conversion between configuration objects and plain data.

Formats only deal with plain data (dicts, lists, scalars). ``to_plain`` turns
a configuration object into that shape before serializing; ``populate``
overlays decoded data onto the caller's object in place.
"""
from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping, MutableMapping
from datetime import timedelta
from typing import Any, Union

from .duration import Duration


def to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, timedelta):
        return str(value if isinstance(value, Duration) else Duration.from_timedelta(value))
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(item) for item in value]
    return value


def populate(target: Any, data: Any) -> Any:
    """Overlay ``data`` onto ``target`` and return ``target``."""
    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping for {type(target).__name__}, got {type(data).__name__}")
        hints = typing.get_type_hints(type(target))
        for field in dataclasses.fields(target):
            if field.name not in data:
                continue
            value = data[field.name]
            current = getattr(target, field.name, None)
            if dataclasses.is_dataclass(current) and not isinstance(current, type) and isinstance(value, Mapping):
                populate(current, value)
            else:
                setattr(target, field.name, convert(value, hints.get(field.name, Any)))
        return target
    if isinstance(target, MutableMapping):
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a mapping, got {type(data).__name__}")
        target.update(data)
        return target
    if isinstance(target, list):
        if not isinstance(data, list):
            raise TypeError(f"expected a list, got {type(data).__name__}")
        target[:] = data
        return target
    raise TypeError(f"cannot load configuration into {type(target).__name__}")


def convert(value: Any, hint: Any) -> Any:
    """Shape a decoded value according to a type hint."""
    if hint is Any or value is None:
        return value

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is Union or origin is types.UnionType:
        options = [a for a in args if a is not type(None)]
        if len(options) == 1:
            return convert(value, options[0])
        return value

    if origin in (list, typing.List) and isinstance(value, list):
        item_hint = args[0] if args else Any
        return [convert(item, item_hint) for item in value]
    if origin is tuple and isinstance(value, list):
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(convert(item, args[0]) for item in value)
        return tuple(value)
    if origin in (set, frozenset) and isinstance(value, list):
        item_hint = args[0] if args else Any
        return origin(convert(item, item_hint) for item in value)
    if origin in (dict, typing.Dict) and isinstance(value, Mapping):
        value_hint = args[1] if len(args) == 2 else Any
        return {key: convert(item, value_hint) for key, item in value.items()}

    if isinstance(hint, type):
        if issubclass(hint, timedelta):
            if isinstance(value, Duration):
                return value
            if isinstance(value, timedelta):
                return Duration.from_timedelta(value)
            if isinstance(value, (str, bytes)):
                return Duration.parse(value)
            raise TypeError(f"expected duration text, got {type(value).__name__}")
        if dataclasses.is_dataclass(hint) and isinstance(value, Mapping):
            return _build(hint, value)
        if hint is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
    return value


def _build(cls: type, data: Mapping) -> Any:
    hints = typing.get_type_hints(cls)
    kwargs = {
        field.name: convert(data[field.name], hints.get(field.name, Any))
        for field in dataclasses.fields(cls)
        if field.init and field.name in data
    }
    return cls(**kwargs)
