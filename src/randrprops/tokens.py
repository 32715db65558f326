"""Token and TokenType definitions for the randrprops lexer.

The lexer produces a stream of Token objects that the parser pulls one at a
time. Each Token has a type, string value, and source location.

Whitespace is never dropped by the lexer. Whether a WHITESPACE token
matters is decided by the parser (see LexerContext).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randrprops.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    NAME = auto()  # eDP-1, connected, 1920x1080, 310mm
    INT_VALUE = auto()  # 1080
    FLOAT_VALUE = auto()  # 60.00
    PUNCTUATOR = auto()  # + - : ( ) * ,
    WHITESPACE = auto()  # run of spaces, or one tab
    LINE_TERMINATOR = auto()  # \n
    EOF = auto()

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return _LABELS[self]


_LABELS: dict[TokenType, str] = {
    TokenType.NAME: "Name",
    TokenType.INT_VALUE: "IntValue",
    TokenType.FLOAT_VALUE: "FloatValue",
    TokenType.PUNCTUATOR: "Punctuator",
    TokenType.WHITESPACE: "WhiteSpace",
    TokenType.LINE_TERMINATOR: "LineTerminator",
    TokenType.EOF: "EndOfInput",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The decoded literal from the report
        _lineno: Start line number (1-indexed)
        _col: Start byte column (1-indexed)
        _start_offset: Absolute start offset in the buffer
        _end_offset: Absolute end offset in the buffer
        _source_file: Optional name of the report source

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from randrprops.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    def is_tab(self) -> bool:
        """Whether this is a single-tab WHITESPACE token."""
        return self.type is TokenType.WHITESPACE and self.value == "\t"
