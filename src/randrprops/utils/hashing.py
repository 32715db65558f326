"""Hashing utilities for randrprops.

Cache keys use SHA-256; output fingerprints default to MD5 so they match
digests computed by other display tools over the same name + EDID data.

Example:
    >>> from randrprops.utils.hashing import hash_bytes, hash_str
    >>> hash_str("hello world", algorithm="md5")
    '5eb63bbbe01eeed093cb22bb8f5acdc3'
"""

import hashlib


def hash_str(content: str, algorithm: str = "sha256") -> str:
    """Hash UTF-8 encoded string content.

    Args:
        content: String content to hash
        algorithm: hashlib algorithm name ('sha256', 'md5')

    Returns:
        Hex digest
    """
    return hash_bytes(content.encode("utf-8"), algorithm=algorithm)


def hash_bytes(content: bytes, algorithm: str = "sha256") -> str:
    """Hash raw bytes, such as a report buffer.

    Args:
        content: Bytes to hash
        algorithm: hashlib algorithm name ('sha256', 'md5')

    Returns:
        Hex digest
    """
    return hashlib.new(algorithm, content).hexdigest()
