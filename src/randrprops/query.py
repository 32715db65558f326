"""Running the display query command.

Fetches the raw report that the parser consumes. The runner is injectable
so callers and tests can substitute the subprocess call.

Example:
    >>> from randrprops import parse_props
    >>> from randrprops.query import query_props
    >>> result = parse_props(query_props(display=":0"))
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Sequence
from typing import Any

from randrprops.errors import QueryError
from randrprops.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("xrandr", "--props")

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


def query_props(
    command: Sequence[str] = DEFAULT_COMMAND,
    *,
    display: str | None = None,
    timeout: float | None = None,
    runner: Runner = subprocess.run,
) -> bytes:
    """Run the query command and return its standard output.

    Args:
        command: Command line to run
        display: X display to query (sets DISPLAY for the child)
        timeout: Seconds to wait before giving up
        runner: subprocess.run compatible callable

    Returns:
        Raw report bytes

    Raises:
        QueryError: If the command cannot be started, times out, or exits
            with a non-zero status.
    """
    command = tuple(command)
    kwargs: dict[str, Any] = {"capture_output": True, "timeout": timeout, "check": False}
    if display is not None:
        kwargs["env"] = {**os.environ, "DISPLAY": display}

    logger.info("running %s", " ".join(command))
    try:
        proc = runner(command, **kwargs)
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.error("could not run %s: %s", " ".join(command), exc)
        raise QueryError(command, stderr=str(exc)) from exc

    stderr = (proc.stderr or b"").decode("utf-8", errors="replace")
    if proc.returncode != 0:
        logger.error("%s exit %d stderr: %s", command[0], proc.returncode, stderr)
        raise QueryError(command, proc.returncode, stderr)
    if stderr:
        logger.warning("%s stderr (no error): %s", command[0], stderr)

    return proc.stdout
