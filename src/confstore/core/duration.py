"""Duration field type for configuration schemas.

``Duration`` is a ``timedelta`` that reads and writes the compact text form
used by Go-style configs, e.g. ``"1h30m0s"``, ``"250ms"`` or ``"-1.5s"``.
Values are held at microsecond resolution; nanosecond input is truncated.
"""
from __future__ import annotations

import re
from datetime import timedelta

from .errors import DurationParseError

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
_NS_PER_MIN = 60 * _NS_PER_S
_NS_PER_HOUR = 60 * _NS_PER_MIN

_UNITS = {
    "ns": 1,
    "us": _NS_PER_US,
    "µs": _NS_PER_US,  # micro sign
    "μs": _NS_PER_US,  # greek mu
    "ms": _NS_PER_MS,
    "s": _NS_PER_S,
    "m": _NS_PER_MIN,
    "h": _NS_PER_HOUR,
}

_SEGMENT = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]+)")


def _to_nanoseconds(value: timedelta) -> int:
    return ((value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds) * _NS_PER_US


def _fixed(value: int, precision: int) -> str:
    whole, frac = divmod(value, 10**precision)
    if not frac:
        return str(whole)
    return f"{whole}.{str(frac).rjust(precision, '0').rstrip('0')}"


def format_duration(value: timedelta) -> str:
    ns = _to_nanoseconds(value)
    magnitude = abs(ns)
    if magnitude == 0:
        return "0s"
    if magnitude < _NS_PER_US:
        text = f"{magnitude}ns"
    elif magnitude < _NS_PER_MS:
        text = _fixed(magnitude, 3) + "µs"
    elif magnitude < _NS_PER_S:
        text = _fixed(magnitude, 6) + "ms"
    else:
        hours, rest = divmod(magnitude, _NS_PER_HOUR)
        minutes, rest = divmod(rest, _NS_PER_MIN)
        text = _fixed(rest, 9) + "s"
        if hours or minutes:
            text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return "-" + text if ns < 0 else text


def parse_nanoseconds(text: str) -> int:
    original = text
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        raise DurationParseError(f"invalid duration {original!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _SEGMENT.match(text, pos)
        if match is None:
            raise DurationParseError(f"invalid duration {original!r}")
        whole, frac, unit = match.groups()
        frac = frac or ""
        if not whole and not frac:
            raise DurationParseError(f"invalid duration {original!r}")
        scale = _UNITS.get(unit)
        if scale is None:
            raise DurationParseError(f"unknown unit {unit!r} in duration {original!r}")
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()
    return sign * total


class Duration(timedelta):
    """A ``timedelta`` with a text form suitable for configuration files."""

    def __str__(self) -> str:
        return format_duration(self)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        return cls(days=value.days, seconds=value.seconds, microseconds=value.microseconds)

    @classmethod
    def parse(cls, text: str | bytes) -> "Duration":
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DurationParseError(f"invalid duration {text!r}") from exc
        ns = parse_nanoseconds(text)
        micro = abs(ns) // _NS_PER_US
        try:
            return cls(microseconds=-micro if ns < 0 else micro)
        except OverflowError as exc:
            raise DurationParseError(f"invalid duration {text!r}") from exc
