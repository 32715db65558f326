"""Mode list parsing.

Modes close an output block, one per space-indented line:

   1920x1080     60.02*+  60.01    59.97
   1280x1024     75.02    60.02 +
   1920x1080i    60.00    50.00

"*" marks the current rate and "+" the preferred one. A line whose first
word is not a mode resolution is the next output's status line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randrprops.nodes import OutputMode, Rate
from randrprops.parsing.patterns import match_mode_resolution
from randrprops.tokens import TokenType

if TYPE_CHECKING:
    from randrprops.config import ParseConfig
    from randrprops.parsing.builder import OutputBuilder
    from randrprops.tokens import Token


class ModeParsingMixin:
    """Mixin for the mode list of an output.

    Required Host Attributes:
        - _current: Token
        - _config: ParseConfig

    Required Host Methods:
        - _advance, _at, _accept (TokenNavigationMixin)

    """

    _current: Token
    _config: ParseConfig

    def _parse_modes(self, output: OutputBuilder) -> None:
        """Parse mode lines while their first word is a mode resolution.

        Runs with whitespace skipped; only an indented line has modes.
        """
        if not self._at(TokenType.WHITESPACE):
            return
        self._advance()

        allow_interlaced = self._config.interlaced_modes
        while self._at(TokenType.NAME):
            match = match_mode_resolution(self._current.value, allow_interlaced=allow_interlaced)
            if not match:
                return
            self._advance()

            output.modes.append(OutputMode(match.value, self._parse_rates()))

            if self._at(TokenType.LINE_TERMINATOR):
                # Also drops the indentation of the next line.
                self._advance()

    def _parse_rates(self) -> tuple[Rate, ...]:
        rates: list[Rate] = []
        while self._at(TokenType.FLOAT_VALUE):
            value = float(self._current.value)
            self._advance()
            is_current = self._accept(TokenType.PUNCTUATOR, "*") is not None
            is_preferred = self._accept(TokenType.PUNCTUATOR, "+") is not None
            rates.append(Rate(value, is_current=is_current, is_preferred=is_preferred))
        return tuple(rates)
