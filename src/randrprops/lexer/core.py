"""Pull-based lexer for xrandr --props reports.

Classifies raw report bytes into tokens one at a time. Character-class
driven only: it knows nothing about outputs, modes or properties.

Thread Safety:
Lexer instances are single-use. Create one per report buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from randrprops.errors import LexError
from randrprops.lexer.modes import (
    ASCII_DIGITS,
    NEWLINE,
    PUNCTUATORS,
    SPACE,
    TAB,
    WORD_BREAKS,
)
from randrprops.tokens import Token, TokenType


def classify_word(word: str) -> TokenType:
    """Classify a word as INT_VALUE, FLOAT_VALUE or NAME.

    Only pure ASCII numeric literals are numbers; "1920x1080" and "310mm"
    stay names and are picked apart later by the parser.
    """
    head, dot, tail = word.partition(".")
    if not head or not ASCII_DIGITS.issuperset(head):
        return TokenType.NAME
    if not dot:
        return TokenType.INT_VALUE
    if tail and ASCII_DIGITS.issuperset(tail):
        return TokenType.FLOAT_VALUE
    return TokenType.NAME


class Lexer:
    """Context-free lexer over a report buffer.

    Usage:
            >>> lexer = Lexer(b"eDP-1 connected\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(NAME, 'eDP-1', 1:1)
        Token(WHITESPACE, ' ', 1:6)
        Token(NAME, 'connected', 1:7)
        Token(LINE_TERMINATOR, '\\n', 1:16)
        Token(EOF, '', 2:1)

    Thread Safety:
        Lexer instances are single-use. Create one per report buffer.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_line_start",  # Offset of the first byte of the current line
        "_source_file",
    )

    def __init__(self, source: bytes, source_file: str | None = None) -> None:
        """Initialize lexer with a report buffer.

        Args:
            source: Raw report bytes
            source_file: Optional name of the report source for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._line_start = 0
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the whole buffer.

        Yields:
            Token objects one at a time, ending with a single EOF token.
        """
        while True:
            token = self.scan()
            yield token
            if token.type is TokenType.EOF:
                return

    def scan(self) -> Token:
        """Scan the next token from the cursor.

        Returns EOF on every call once the buffer is exhausted.

        Raises:
            LexError: If a name literal is not valid UTF-8.
        """
        start = self._pos
        if start >= self._source_len:
            return self._make_token(TokenType.EOF, "", start)

        byte = self._source[start]

        if byte == NEWLINE:
            token = self._make_token(TokenType.LINE_TERMINATOR, "\n", start, start + 1)
            self._pos = start + 1
            self._lineno += 1
            self._line_start = self._pos
            return token

        if byte == SPACE:
            end = start + 1
            while end < self._source_len and self._source[end] == SPACE:
                end += 1
            return self._commit(TokenType.WHITESPACE, " " * (end - start), start, end)

        if byte == TAB:
            # Never coalesced: the parser counts tabs as tokens.
            return self._commit(TokenType.WHITESPACE, "\t", start, start + 1)

        if byte in PUNCTUATORS:
            return self._commit(TokenType.PUNCTUATOR, chr(byte), start, start + 1)

        end = self._find_word_end(start + 1)
        word = self._decode(start, end)
        return self._commit(classify_word(word), word, start, end)

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _find_word_end(self, pos: int) -> int:
        """Find the end of a word that started just before pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] not in WORD_BREAKS:
            pos += 1
        return pos

    def _decode(self, start: int, end: int) -> str:
        try:
            return self._source[start:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            offset = start + exc.start
            raise LexError(
                offset,
                lineno=self._lineno,
                col_offset=offset - self._line_start + 1,
                source_file=self._source_file,
            ) from exc

    def _commit(self, token_type: TokenType, value: str, start: int, end: int) -> Token:
        """Create a token for source[start:end] and move the cursor past it."""
        token = self._make_token(token_type, value, start, end)
        self._pos = end
        return token

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start: int,
        end: int | None = None,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=start - self._line_start + 1,
            _start_offset=start,
            _end_offset=end if end is not None else start,
            _source_file=self._source_file,
        )
