"""Token navigation utilities for the randrprops parser.

Provides the mixin for pulling tokens from the lexer with one token of
lookahead, and the expect/accept primitives the grammar is written in.

Every advance takes an explicit LexerContext. There is no skip-whitespace
flag stored on the parser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randrprops.errors import ParseError
from randrprops.lexer.modes import LexerContext
from randrprops.tokens import Token, TokenType
from randrprops.utils.logger import get_logger

if TYPE_CHECKING:
    from randrprops.lexer import Lexer

logger = get_logger(__name__)

SKIP = LexerContext.SKIP_WHITESPACE
SIGNIFICANT = LexerContext.SIGNIFICANT_WHITESPACE


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer
        - _current: Token
        - _trace: bool

    """

    _lexer: Lexer
    _current: Token
    _trace: bool

    def _advance(self, context: LexerContext = SKIP) -> Token:
        """Pull the next token visible in context and make it current."""
        token = self._lexer.scan()
        if context is SKIP:
            while token.type is TokenType.WHITESPACE:
                token = self._lexer.scan()
        if self._trace:
            logger.debug("token %r (%s)", token, context.name)
        self._current = token
        return token

    def _at(self, token_type: TokenType, *values: str) -> bool:
        """Check the current token's type and, optionally, its literal."""
        token = self._current
        return token.type is token_type and (not values or token.value in values)

    def _at_eof(self) -> bool:
        return self._current.type is TokenType.EOF

    def _at_tab(self) -> bool:
        return self._current.is_tab()

    def _expect(
        self,
        token_type: TokenType,
        *values: str,
        context: LexerContext = SKIP,
    ) -> Token:
        """Require the current token, then advance past it.

        Args:
            token_type: Required token type
            *values: Accepted literals (any literal if empty)
            context: Context for pulling the following token

        Returns:
            The matched token

        Raises:
            ParseError: If the current token does not match
        """
        token = self._current
        if not self._at(token_type, *values):
            raise ParseError.unexpected(token, token_type, values)
        self._advance(context)
        return token

    def _accept(
        self,
        token_type: TokenType,
        *values: str,
        context: LexerContext = SKIP,
    ) -> Token | None:
        """Consume the current token if it matches; otherwise leave it."""
        token = self._current
        if not self._at(token_type, *values):
            return None
        self._advance(context)
        return token

    def _collect_line(self, context: LexerContext = SIGNIFICANT) -> str:
        """Concatenate literals from the current token up to end of line.

        Stops on (without consuming) the LINE_TERMINATOR or EOF.
        """
        parts: list[str] = []
        while not self._at(TokenType.LINE_TERMINATOR) and not self._at_eof():
            parts.append(self._current.value)
            self._advance(context)
        return "".join(parts)

    def _skip_line(self, context: LexerContext = SIGNIFICANT) -> None:
        """Advance to the LINE_TERMINATOR or EOF ending the current line."""
        while not self._at(TokenType.LINE_TERMINATOR) and not self._at_eof():
            self._advance(context)
