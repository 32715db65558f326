"""
randrprops — Typed parser for xrandr --props reports

Turns the loosely delimited text that `xrandr --props` prints into frozen
dataclasses: outputs, geometry, modes, refresh rates and properties.
Zero runtime dependencies.

Quick Start:
    >>> from randrprops import parse_props
    >>> result = parse_props(report_bytes)
    >>> [o.name for o in result.connected]
    ['eDP-1', 'HDMI-1']
    >>> result.find("eDP-1").properties["EDID"]
    '00ffffffffffff00...'

    >>> # Fetch and parse in one go
    >>> from randrprops.query import query_props
    >>> result = parse_props(query_props())

Change Detection:
    >>> from randrprops import OutputMonitor
    >>> monitor = OutputMonitor()
    >>> monitor.refresh().changed
    True

Installation:
    pip install randrprops
"""

from randrprops.cache import DictParseCache, ParseCache, hash_config, hash_content
from randrprops.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from randrprops.errors import LexError, ParseError, QueryError, RandrPropsError
from randrprops.fingerprint import fingerprint
from randrprops.lexer import Lexer, LexerContext
from randrprops.location import SourceLocation
from randrprops.monitor import OutputMonitor, Snapshot
from randrprops.nodes import (
    Dimensions,
    Output,
    OutputMode,
    Position,
    PropsOutput,
    Rate,
    Reflection,
    Resolution,
    Rotation,
)
from randrprops.parser import Parser
from randrprops.query import query_props
from randrprops.serialization import from_dict, from_json, to_dict, to_json
from randrprops.tokens import Token, TokenType

__version__ = "0.1.0"


def parse_props(
    source: bytes | str,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
    config: ParseConfig | None = None,
) -> PropsOutput:
    """Parse an xrandr --props report into a typed result.

    Args:
        source: Report bytes (str is encoded as UTF-8)
        source_file: Optional name of the report source for error messages
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result.
        config: Parse configuration for this call (uses the active
            context configuration if None)

    Returns:
        PropsOutput with every output in report order

    Raises:
        LexError: If the report holds malformed UTF-8.
        ParseError: If the report does not follow the expected grammar.

    Example:
        >>> result = parse_props(report)
        >>> result.outputs[0].modes[0].rates[0]
        Rate(value=60.02, is_current=True, is_preferred=True)
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    if config is None:
        config = get_parse_config()

    with parse_config_context(config):
        if cache is None:
            return Parser(source, source_file=source_file).parse()

        content_hash = hash_content(source)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

        result = Parser(source, source_file=source_file).parse()
        cache.put(content_hash, config_hash, result)
        return result


__all__ = [
    # Main API
    "parse_props",
    "query_props",
    "fingerprint",
    "Parser",
    "Lexer",
    "LexerContext",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Caching
    "ParseCache",
    "DictParseCache",
    "hash_content",
    "hash_config",
    # Monitoring
    "OutputMonitor",
    "Snapshot",
    # Serialization
    "to_dict",
    "to_json",
    "from_dict",
    "from_json",
    # Model
    "PropsOutput",
    "Output",
    "OutputMode",
    "Rate",
    "Resolution",
    "Position",
    "Dimensions",
    "Rotation",
    "Reflection",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "RandrPropsError",
    "LexError",
    "ParseError",
    "QueryError",
]
