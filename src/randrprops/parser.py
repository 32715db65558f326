"""Recursive descent parser producing the typed output model.

Pulls tokens from the Lexer on demand and builds a PropsOutput, field by
field and output by output.

Architecture:
The parser uses a mixin-based design, one mixin per production group:
- `TokenNavigationMixin`: Token pulling with an explicit LexerContext
- `ScreenParsingMixin`: Screen header (matched and discarded)
- `OutputParsingMixin`: Output status line
- `PropertyParsingMixin`: Property block (whitespace significant)
- `ModeParsingMixin`: Mode list

Thread Safety:
- Parser produces an immutable result (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- A Parser instance must not be shared across threads

"""

from __future__ import annotations

from randrprops.config import ParseConfig, get_parse_config
from randrprops.lexer import Lexer, LexerContext
from randrprops.nodes import Output, PropsOutput
from randrprops.parsing import (
    ModeParsingMixin,
    OutputParsingMixin,
    PropertyParsingMixin,
    ScreenParsingMixin,
    TokenNavigationMixin,
)
from randrprops.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    ScreenParsingMixin,
    OutputParsingMixin,
    PropertyParsingMixin,
    ModeParsingMixin,
):
    """Recursive descent parser for xrandr --props reports.

    Grammar:
        Document := ScreenHeader Output+

    Usage:
            >>> parser = Parser(report_bytes)
            >>> result = parser.parse()
            >>> result.outputs[0].name
        'eDP-1'

    Thread Safety:
        Parser instances are not thread-safe. Create one per parse
        operation. The resulting PropsOutput is immutable.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lexer",
        "_current",
        "_trace",
    )

    def __init__(
        self,
        source: bytes | str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with report text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Report bytes (str is encoded as UTF-8)
            source_file: Optional name of the report source for error messages

        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        self._source = source
        self._source_file = source_file
        self._trace = False

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> PropsOutput:
        """Parse the report into a PropsOutput.

        Returns:
            PropsOutput holding every output in report order

        Raises:
            LexError: If the report holds malformed UTF-8.
            ParseError: On the first required token that does not match.
                No partial result is returned.
        """
        self._lexer = Lexer(self._source, self._source_file)
        self._trace = self._config.trace_tokens
        self._advance(LexerContext.SKIP_WHITESPACE)

        self._parse_screen()

        outputs: list[Output] = []
        while True:
            output = self._parse_output()
            logger.debug(
                "parsed output %s: connected=%s enabled=%s, %d properties, %d modes",
                output.name,
                output.is_connected,
                output.is_enabled,
                len(output.properties),
                len(output.modes),
            )
            outputs.append(output)
            if self._at_eof():
                break

        logger.debug("parsed %d outputs from %d bytes", len(outputs), len(self._source))
        return PropsOutput(outputs=tuple(outputs))
