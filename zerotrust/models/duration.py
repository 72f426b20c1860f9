"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Human-readable duration value.

The API writes durations as unit-suffixed strings such as ``"15m0s"`` or
``"1h30m0s"``. ``Duration`` parses every such string (``h``, ``m``, ``s``,
``ms``, ``us``/``µs`` and ``ns`` components, optional sign and decimal
fractions) and formats back to the server's canonical form.
"""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5
    "μs": 1_000,  # U+03BC
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")

_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(frac).zfill(digits).rstrip('0')}"


class Duration:
    """
    Immutable span of time with a unit-suffixed string form.

    Precision is one microsecond; finer components are rounded.

    Example::

        Duration.of(minutes=15)          # Duration('15m0s')
        Duration.parse("1h0m0s").value   # timedelta(hours=1)
        str(Duration.parse("900s"))      # '15m0s'
    """

    __slots__ = ("_value",)

    def __init__(self, value: timedelta = timedelta(0)):
        if not isinstance(value, timedelta):
            raise TypeError(f"Duration expects a timedelta, got {type(value).__name__}")
        self._value = value

    @classmethod
    def of(cls, hours: float = 0, minutes: float = 0, seconds: float = 0) -> "Duration":
        return cls(timedelta(hours=hours, minutes=minutes, seconds=seconds))

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """
        Parse a unit-suffixed duration string.

        Raises:
            ValueError: If the string is not a valid duration
        """
        original = text
        text = text.strip()
        negative = text.startswith("-")
        if text[:1] in ("-", "+"):
            text = text[1:]
        if text == "0":
            return cls()
        if not text:
            raise ValueError(f"invalid duration {original!r}")

        total_nanos = Decimal(0)
        pos = 0
        while pos < len(text):
            match = _COMPONENT.match(text, pos)
            if match is None or match.group(1) in ("", "."):
                raise ValueError(f"invalid duration {original!r}")
            try:
                amount = Decimal(match.group(1))
            except InvalidOperation as e:
                raise ValueError(f"invalid duration {original!r}") from e
            total_nanos += amount * _NANOS_PER_UNIT[match.group(2)]
            pos = match.end()

        micros = int((total_nanos / 1000).to_integral_value())
        if negative:
            micros = -micros
        return cls(timedelta(microseconds=micros))

    @classmethod
    def coerce(cls, value: Union["Duration", timedelta, str]) -> "Duration":
        """Build a Duration from a Duration, a timedelta or a duration string."""
        if isinstance(value, Duration):
            return value
        if isinstance(value, timedelta):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"cannot interpret {type(value).__name__} as a duration")

    @property
    def value(self) -> timedelta:
        return self._value

    def total_seconds(self) -> float:
        return self._value.total_seconds()

    def __str__(self) -> str:
        micros = self._value // timedelta(microseconds=1)
        if micros == 0:
            return "0s"
        sign = "-" if micros < 0 else ""
        micros = abs(micros)

        if micros < 1000:
            return f"{sign}{micros}µs"
        if micros < _MICROS_PER_SECOND:
            return f"{sign}{_with_fraction(micros, 1000)}ms"

        hours, rem = divmod(micros, _MICROS_PER_HOUR)
        minutes, rem = divmod(rem, _MICROS_PER_MINUTE)
        seconds = _with_fraction(rem, _MICROS_PER_SECOND)
        if hours:
            return f"{sign}{hours}h{minutes}m{seconds}s"
        if minutes:
            return f"{sign}{minutes}m{seconds}s"
        return f"{sign}{seconds}s"

    def __repr__(self) -> str:
        return f"Duration({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Duration):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )
