"""Property block parsing.

Properties follow the status line, one per tab-indented line. Values may
start inline or on following lines indented by two tabs:

	EDID:
		00ffffffffffff0006af3d5700000000
		001c0104a51f1178028d15a156529d28
	Broadcast RGB: Automatic
		supported: Automatic, Full, Limited 16:235
	non-desktop: 0
		range: (0, 1)

Whitespace is significant throughout: one leading tab starts a property,
two leading tabs continue the previous one.

Continuation lines are appended to values that start on the next line
(EDID) but dropped after inline values (the "supported:" and "range:"
legends above).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randrprops.errors import ParseError
from randrprops.lexer.modes import LexerContext
from randrprops.tokens import TokenType

if TYPE_CHECKING:
    from randrprops.parsing.builder import OutputBuilder
    from randrprops.tokens import Token

SIGNIFICANT = LexerContext.SIGNIFICANT_WHITESPACE


class PropertyParsingMixin:
    """Mixin for tab-indented property blocks.

    Required Host Attributes:
        - _current: Token

    Required Host Methods:
        - _advance, _at, _at_eof, _at_tab, _expect, _collect_line,
          _skip_line (TokenNavigationMixin)

    """

    _current: Token

    def _parse_properties(self, output: OutputBuilder) -> None:
        """Parse properties until a line does not start with a tab.

        Leaves the first token of that line current.
        """
        if not self._at_tab():
            return
        self._advance(SIGNIFICANT)

        while True:
            if self._parse_property(output):
                # The next property's leading tab is already consumed.
                continue
            if not self._at_tab():
                return
            self._advance(SIGNIFICANT)

    def _parse_property(self, output: OutputBuilder) -> bool:
        """Parse one property whose leading tab has been consumed.

        Returns:
            True if parsing stopped on the name of the next property (its
            leading tab consumed), False if it stopped at the start of a
            line that is not a property line or at EOF.

        Raises:
            ParseError: If the name, colon or separating space is missing.
        """
        name = self._parse_property_name()
        self._expect(TokenType.PUNCTUATOR, ":", context=SIGNIFICANT)
        self._expect(TokenType.WHITESPACE, " ", context=SIGNIFICANT)

        if self._at(TokenType.LINE_TERMINATOR):
            value, next_started = self._parse_continuation_lines(keep=True)
        else:
            value = self._collect_line()
            _, next_started = self._parse_continuation_lines(keep=False)

        output.properties[name.strip()] = value.strip()
        return next_started

    def _parse_property_name(self) -> str:
        """Concatenate every literal up to the colon ("Broadcast RGB")."""
        parts = [self._expect(TokenType.NAME, context=SIGNIFICANT).value]
        while not self._at(TokenType.PUNCTUATOR, ":"):
            if self._at(TokenType.LINE_TERMINATOR) or self._at_eof():
                raise ParseError.unexpected(self._current, TokenType.PUNCTUATOR, (":",))
            parts.append(self._current.value)
            self._advance(SIGNIFICANT)
        return "".join(parts)

    def _parse_continuation_lines(self, *, keep: bool) -> tuple[str, bool]:
        """Consume two-tab continuation lines after a property line.

        Expects the LINE_TERMINATOR (or EOF) ending the property line to be
        current.

        Args:
            keep: Collect continuation content instead of discarding it

        Returns:
            (joined continuation content, whether a new property started)
        """
        parts: list[str] = []
        while self._at(TokenType.LINE_TERMINATOR):
            self._advance(SIGNIFICANT)
            if not self._at_tab():
                return "".join(parts), False
            self._advance(SIGNIFICANT)
            if not self._at_tab():
                return "".join(parts), True
            self._advance(SIGNIFICANT)
            if keep:
                parts.append(self._collect_line())
            else:
                self._skip_line()
        return "".join(parts), False
