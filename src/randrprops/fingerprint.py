"""Stable identity of the set of connected outputs.

A fingerprint digests the name and EDID of every connected output, in
report order. Two reports with the same monitors plugged into the same
ports produce the same fingerprint regardless of the current layout, so
it can key saved layouts or detect hotplug changes.

Example:
    >>> from randrprops import parse_props
    >>> from randrprops.fingerprint import fingerprint
    >>> fingerprint(parse_props(report))
    'a3c1...'
"""

from __future__ import annotations

from collections.abc import Iterable

from randrprops.nodes import Output
from randrprops.utils.hashing import hash_str

EDID_PROPERTY = "EDID"


def fingerprint(outputs: Iterable[Output], *, algorithm: str = "md5") -> str:
    """Digest connected outputs' names and EDID values.

    Disconnected outputs are ignored. A connected output without an EDID
    property contributes its name only.

    Args:
        outputs: Outputs in report order (a PropsOutput works too)
        algorithm: hashlib algorithm name

    Returns:
        Hex digest
    """
    parts: list[str] = []
    for output in outputs:
        if not output.is_connected:
            continue
        parts.append(output.name)
        parts.append(output.properties.get(EDID_PROPERTY, ""))
    return hash_str("".join(parts), algorithm=algorithm)
