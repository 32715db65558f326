"""ContextVar-based parse configuration for randrprops.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per caller context and read by every parser in it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from randrprops.config import ParseConfig, parse_config_context
    from randrprops.parser import Parser

    with parse_config_context(ParseConfig(interlaced_modes=False)):
        result = Parser(report).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded. It is per-call state and
    stays on the Parser instance.

    Attributes:
        interlaced_modes: Accept the interlace suffix on mode resolutions
            ("1920x1080i"). When False, such a line ends the mode list.
            Current resolutions always accept the suffix.
        trace_tokens: Log every token the parser pulls at DEBUG level.

    """

    interlaced_modes: bool = True
    trace_tokens: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "interlaced_modes": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.interlaced_modes
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "randrprops_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with parse_config_context(ParseConfig(trace_tokens=True)):
        ...     result = Parser(report).parse()
        >>> # Automatically reset to previous config

    Properly restores previous config even if an exception is raised.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
