"""Logger access for randrprops modules.

Every module logs under the "randrprops" namespace so applications can
tune the whole package with one logger. The package root carries a
NullHandler only; output handlers and levels belong to the application.

Example:
    >>> import logging
    >>> logging.getLogger("randrprops").setLevel(logging.DEBUG)
    >>> get_logger("randrprops.parser").debug("parsed %d outputs", 3)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "randrprops"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, inside the randrprops namespace.

    Names outside the namespace ("query") are nested under it
    ("randrprops.query").
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
