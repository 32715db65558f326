"""Lexer contexts and byte classes.

The lexer itself is context-free. The parser passes a LexerContext on every
request for the next token to say whether WHITESPACE tokens are significant
at that point of the grammar.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerContext(Enum):
    """How the parser consumes whitespace when advancing.

    - SKIP_WHITESPACE: WHITESPACE tokens are discarded (header, status line,
      mode list). Line terminators are never discarded.
    - SIGNIFICANT_WHITESPACE: every token is visible (property blocks, where
      the count of leading tabs carries meaning).

    """

    SKIP_WHITESPACE = auto()
    SIGNIFICANT_WHITESPACE = auto()


NEWLINE = 0x0A
SPACE = 0x20
TAB = 0x09

# Single-byte punctuators. Comma separates the screen header triples.
PUNCTUATORS: frozenset[int] = frozenset(b"+-:()*,")

# Punctuators that do not end a word once it has started (eDP-1, non-desktop).
WORD_INNER_PUNCTUATORS: frozenset[int] = frozenset(b"-")

WORD_BREAKS: frozenset[int] = frozenset((NEWLINE, SPACE, TAB)) | (
    PUNCTUATORS - WORD_INNER_PUNCTUATORS
)

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
