"""Literal pattern matchers for numeric sub-structure inside names.

The lexer hands resolutions and physical sizes to the parser as plain
NAME tokens ("1920x1080i", "310mm"). These matchers recover the numbers
and return a tagged result instead of raising, so callers can use them
for lookahead.

The two resolution shapes differ: the interlace suffix is always allowed
on the current resolution, and on mode resolutions only when requested.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from randrprops.nodes import Resolution

T = TypeVar("T")

_CURRENT_RESOLUTION = re.compile(r"([0-9]+)x([0-9]+)i?")
_MODE_RESOLUTION = re.compile(r"([0-9]+)x([0-9]+)")
_MODE_RESOLUTION_INTERLACED = re.compile(r"([0-9]+)x([0-9]+)i?")
_PHYSICAL_DIMENSION = re.compile(r"([0-9]+)mm")


@dataclass(frozen=True, slots=True)
class PatternMatch(Generic[T]):
    """Outcome of a literal match: a flag plus the value when matched."""

    matched: bool
    value: T | None = None

    def __bool__(self) -> bool:
        return self.matched


_NO_MATCH: PatternMatch = PatternMatch(matched=False)


def _match_resolution(pattern: re.Pattern[str], literal: str) -> PatternMatch[Resolution]:
    m = pattern.fullmatch(literal)
    if m is None:
        return _NO_MATCH
    return PatternMatch(True, Resolution(int(m.group(1)), int(m.group(2))))


def match_current_resolution(literal: str) -> PatternMatch[Resolution]:
    """Match "<w>x<h>" with an optional trailing "i"."""
    return _match_resolution(_CURRENT_RESOLUTION, literal)


def match_mode_resolution(
    literal: str, *, allow_interlaced: bool = True
) -> PatternMatch[Resolution]:
    """Match a mode line resolution.

    Args:
        literal: NAME token literal
        allow_interlaced: Accept a trailing "i" ("1920x1080i")

    Returns:
        Tagged match carrying the Resolution
    """
    pattern = _MODE_RESOLUTION_INTERLACED if allow_interlaced else _MODE_RESOLUTION
    return _match_resolution(pattern, literal)


def match_physical_dimension(literal: str) -> PatternMatch[int]:
    """Match "<n>mm" and return n."""
    m = _PHYSICAL_DIMENSION.fullmatch(literal)
    if m is None:
        return _NO_MATCH
    return PatternMatch(True, int(m.group(1)))


__all__ = [
    "PatternMatch",
    "match_current_resolution",
    "match_mode_resolution",
    "match_physical_dimension",
]
