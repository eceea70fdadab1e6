"""Outcome of parsing a single raw config value.

Holiday lines and trip times that cannot be parsed are dropped instead of
failing the whole load. Parsers return ``Skipped`` for those values so the
drop is a visible branch rather than a swallowed exception.
"""

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """A raw value that was parsed successfully."""

    raw: str
    value: T


@dataclass(frozen=True)
class Skipped:
    """A raw value that was dropped, with the reason."""

    raw: str
    reason: str


def parse_int(text: str) -> int | None:
    """Parse a plain ASCII integer with optional sign, without surrounding whitespace."""
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)
