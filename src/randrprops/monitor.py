"""Change detection across successive reports.

OutputMonitor fetches and parses a fresh report on every refresh() and
compares its fingerprint with the previous one. What triggers a refresh
(window manager events, udev, a timer) is up to the caller.

Example:
    >>> monitor = OutputMonitor()
    >>> snapshot = monitor.refresh()
    >>> if snapshot.changed:
    ...     apply_layout(snapshot.fingerprint, snapshot.result)

Thread Safety:
    Not thread-safe. Serialize refresh() calls externally.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from randrprops.cache import DictParseCache, ParseCache
from randrprops.fingerprint import fingerprint
from randrprops.nodes import PropsOutput
from randrprops.query import query_props
from randrprops.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Result of one refresh.

    Attributes:
        result: Parsed report
        fingerprint: Digest of the connected outputs
        changed: Whether the fingerprint differs from the previous refresh
            (always True on the first refresh)

    """

    result: PropsOutput
    fingerprint: str
    changed: bool


class OutputMonitor:
    """Fetch, parse and fingerprint reports on demand."""

    __slots__ = ("_fetch", "_cache", "_last")

    def __init__(
        self,
        fetch: Callable[[], bytes] = query_props,
        cache: ParseCache | None = None,
    ) -> None:
        """Initialize monitor.

        Args:
            fetch: Returns a raw report on each call
            cache: Parse cache; defaults to a private DictParseCache that
                keeps only the latest report
        """
        self._fetch = fetch
        self._cache = cache if cache is not None else DictParseCache(maxsize=1)
        self._last: Snapshot | None = None

    @property
    def last(self) -> Snapshot | None:
        """Most recent snapshot, or None before the first refresh."""
        return self._last

    def refresh(self) -> Snapshot:
        """Fetch and parse a report, and compare it with the previous one.

        Raises:
            QueryError: If fetching fails.
            LexError, ParseError: If the report cannot be parsed.
        """
        from randrprops import parse_props

        result = parse_props(self._fetch(), cache=self._cache)
        digest = fingerprint(result)
        changed = self._last is None or self._last.fingerprint != digest
        if changed:
            logger.info(
                "connected outputs changed: %s (%s)",
                ", ".join(output.name for output in result.connected) or "none",
                digest,
            )
        self._last = Snapshot(result=result, fingerprint=digest, changed=changed)
        return self._last
