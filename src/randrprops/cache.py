"""Content-addressed parse cache for randrprops.

Provides (content_hash, config_hash) -> PropsOutput caching to avoid
re-parsing an unchanged report. Display events often fire in bursts while
the report stays the same, so most refreshes become cache hits.

Thread Safety:
    DictParseCache is not thread-safe. For parallel use, wrap it with a lock
    or use a cache implementation with internal locking.

Example:
    >>> from randrprops import parse_props, DictParseCache
    >>> cache = DictParseCache()
    >>> first = parse_props(report, cache=cache)
    >>> second = parse_props(report, cache=cache)  # Cache hit, no re-parse
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from randrprops.utils.hashing import hash_bytes, hash_str

if TYPE_CHECKING:
    from randrprops.config import ParseConfig
    from randrprops.nodes import PropsOutput


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is PropsOutput,
    which is immutable and safe to share.
    """

    def get(self, content_hash: str, config_hash: str) -> PropsOutput | None:
        """Return cached PropsOutput if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, result: PropsOutput) -> None:
        """Store PropsOutput in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    With maxsize set, the oldest entries are evicted once the cache holds
    more than maxsize results. A hit does not refresh an entry's age.

    Not thread-safe. For parallel parsing, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data", "_maxsize")

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self._data: dict[tuple[str, str], PropsOutput] = {}
        self._maxsize = maxsize

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def __len__(self) -> int:
        return len(self._data)

    def get(self, content_hash: str, config_hash: str) -> PropsOutput | None:
        """Return cached PropsOutput if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, result: PropsOutput) -> None:
        """Store PropsOutput in cache."""
        self._data[(content_hash, config_hash)] = result
        if self._maxsize is not None:
            while len(self._data) > self._maxsize:
                del self._data[next(iter(self._data))]

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: bytes) -> str:
    """Compute SHA256 hash of the report for cache key."""
    return hash_bytes(source)


def hash_config(config: ParseConfig) -> str:
    """Compute hash of ParseConfig for cache key.

    Only fields that change the parse result take part; trace_tokens
    does not.
    """
    return hash_str(f"interlaced_modes={config.interlaced_modes}")


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
