"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in report text.
Columns are byte columns: the lexer works on the raw report bytes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).
    Offsets are absolute byte offsets into the report buffer.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting byte column (1-indexed)
        offset: Absolute start offset in the buffer
        end_offset: Absolute end offset in the buffer
        source_file: Name of the report source (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=9)
            >>> str(loc)
            '2:9'

            >>> str(SourceLocation(1, 1, source_file="xrandr --props"))
            'xrandr --props:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "props.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
