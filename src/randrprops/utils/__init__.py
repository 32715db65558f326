"""Utility modules for randrprops.

Provides:
- hashing: hash_str, hash_bytes for cache keys and fingerprints
- logger: get_logger for logging
"""

from randrprops.utils.hashing import hash_bytes, hash_str
from randrprops.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_bytes",
    "hash_str",
]
