"""Screen header parsing.

The first report line describes the X screen:

    Screen 0: minimum 320 x 200, current 3840 x 1080, maximum 16384 x 16384

Its content is matched token by token and discarded.
"""

from __future__ import annotations

from randrprops.tokens import TokenType


class ScreenParsingMixin:
    """Mixin for the fixed screen header sequence.

    Required Host Methods:
        - _expect (TokenNavigationMixin)

    """

    def _parse_screen(self) -> None:
        """Match the whole header line including its line terminator.

        Raises:
            ParseError: On the first token that does not fit the header.
        """
        self._expect(TokenType.NAME, "Screen")
        self._expect(TokenType.INT_VALUE)
        self._expect(TokenType.PUNCTUATOR, ":")
        self._parse_screen_size("minimum")
        self._expect(TokenType.PUNCTUATOR, ",")
        self._parse_screen_size("current")
        self._expect(TokenType.PUNCTUATOR, ",")
        self._parse_screen_size("maximum")
        self._expect(TokenType.LINE_TERMINATOR)

    def _parse_screen_size(self, keyword: str) -> None:
        """Match "<keyword> <width> x <height>"."""
        self._expect(TokenType.NAME, keyword)
        self._expect(TokenType.INT_VALUE)
        self._expect(TokenType.NAME, "x")
        self._expect(TokenType.INT_VALUE)
