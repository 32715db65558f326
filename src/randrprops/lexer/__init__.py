"""Lexer for xrandr --props reports.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerContext
├── core.py              # Lexer class (byte classification + positions)
└── modes.py             # LexerContext enum, byte class constants

Usage:
    >>> from randrprops.lexer import Lexer
    >>> lexer = Lexer(b"1920x1080+0+0")
    >>> [t.type.name for t in lexer.tokenize()]
    ['NAME', 'PUNCTUATOR', 'INT_VALUE', 'PUNCTUATOR', 'INT_VALUE', 'EOF']

"""

from randrprops.lexer.core import Lexer
from randrprops.lexer.modes import LexerContext

__all__ = ["Lexer", "LexerContext"]
