"""Exception classes for randrprops.

Provides standardized exceptions for error handling throughout randrprops.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randrprops.tokens import Token, TokenType


class RandrPropsError(Exception):
    """Base exception for all randrprops errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(RandrPropsError):
    """Malformed byte sequence in the report.

    Raised when a name literal is not valid UTF-8. Carries the absolute
    byte offset of the first offending byte.
    """

    def __init__(
        self,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error.

        Args:
            offset: Absolute byte offset of the malformed byte
            lineno: Line number of the malformed byte (1-indexed)
            col_offset: Byte column of the malformed byte (1-indexed)
            source_file: Name of the report source (optional)
        """
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = f"{source_file}:" if source_file else ""
        if lineno is not None and col_offset is not None:
            location += f"{lineno}:{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}malformed UTF-8 at byte offset {offset}")


class ParseError(RandrPropsError):
    """Grammar mismatch in the report.

    Raised on the first required token that does not match. Carries the
    token found, what was expected, and where.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        *,
        found_type: TokenType | None = None,
        found_value: str | None = None,
        expected_type: TokenType | None = None,
        expected_values: Sequence[str] = (),
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Byte column where error occurred (1-indexed)
            source_file: Name of the report source (optional)
            found_type: Type of the offending token
            found_value: Literal of the offending token
            expected_type: Token type the grammar wanted
            expected_values: Literal alternatives the grammar wanted
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.found_type = found_type
        self.found_value = found_value
        self.expected_type = expected_type
        self.expected_values = tuple(expected_values)

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def unexpected(
        cls,
        token: Token,
        expected_type: TokenType,
        expected_values: Sequence[str] = (),
        *,
        description: str | None = None,
    ) -> ParseError:
        """Build the error for a token that does not match expectations.

        Args:
            token: The offending token
            expected_type: Token type the grammar wanted
            expected_values: Literal alternatives the grammar wanted
            description: Shape the literal should have, when a pattern
                rather than a fixed literal was wanted

        Returns:
            ParseError positioned at the offending token
        """
        wanted = expected_type.label
        if description:
            wanted += f" ({description})"
        elif expected_values:
            wanted += " (" + " | ".join(repr(v) for v in expected_values) + ")"
        message = (
            f"unexpected token found: {token.type.label} ({token.value!r}). "
            f"Wanted: {wanted}"
        )
        return cls(
            message,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token._source_file,
            found_type=token.type,
            found_value=token.value,
            expected_type=expected_type,
            expected_values=expected_values,
        )


class QueryError(RandrPropsError):
    """Error running the display query command.

    Raised when the command is missing or exits with a non-zero status.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize query error.

        Args:
            command: The command line that was run
            returncode: Exit status, or None if the command never started
            stderr: Captured standard error output
        """
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr

        shown = " ".join(self.command)
        if returncode is None:
            message = f"could not run {shown!r}"
        else:
            message = f"{shown!r} exited with status {returncode}"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)
