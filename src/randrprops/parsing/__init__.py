"""Parsing subsystem for the randrprops parser.

Provides mixin classes, one per production group of the report grammar:
- `TokenNavigationMixin`: Token pulling, expect/accept primitives
- `ScreenParsingMixin`: Screen header line
- `OutputParsingMixin`: Output status line
- `PropertyParsingMixin`: Tab-indented property block
- `ModeParsingMixin`: Mode list

Example:
    >>> class Parser(
    ...     TokenNavigationMixin,
    ...     ScreenParsingMixin,
    ...     OutputParsingMixin,
    ...     PropertyParsingMixin,
    ...     ModeParsingMixin,
    ... ):
    ...     pass

"""

from randrprops.parsing.modes import ModeParsingMixin
from randrprops.parsing.output import OutputParsingMixin
from randrprops.parsing.properties import PropertyParsingMixin
from randrprops.parsing.screen import ScreenParsingMixin
from randrprops.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "ScreenParsingMixin",
    "OutputParsingMixin",
    "PropertyParsingMixin",
    "ModeParsingMixin",
]
