"""Shared report fixtures.

Reports are built from lines with explicit "\\t" escapes so the tab
structure of property blocks is visible in the tests.
"""

from collections.abc import Callable

import pytest

from randrprops.config import reset_parse_config

HEADER = "Screen 0: minimum 320 x 200, current 3840 x 1080, maximum 16384 x 16384"

LEGEND = "(normal left inverted right x axis y axis)"

SAMPLE_LINES = (
    HEADER,
    f"eDP-1 connected primary 1920x1080+0+0 {LEGEND} 309mm x 174mm",
    "\tEDID: ",
    "\t\t00ffffffffffff0006af3d5700000000",
    "\t\t001c0104a51f1178028d15a156529d28",
    "\tscaling mode: Full aspect ",
    "\t\tsupported: Full, Center, Full aspect",
    "\tBroadcast RGB: Automatic ",
    "\t\tsupported: Automatic, Full, Limited 16:235",
    "\tlink-status: Good ",
    "\t\tsupported: Good, Bad",
    "\tnon-desktop: 0 ",
    "\t\trange: (0, 1)",
    "   1920x1080     60.02*+  60.01    59.97  ",
    "   1680x1050     59.95    59.88  ",
    f"HDMI-1 connected 1920x1080+1920+0 left {LEGEND} 527mm x 296mm",
    "\tEDID: ",
    "\t\t00ffffffffffff001e6d0777aa9d0100",
    "\tBrightness: 1.000000",
    "   1920x1080     60.00 +  50.00    59.94* ",
    "   1920x1080i    60.00    50.00  ",
    f"DP-1 disconnected {LEGEND}",
    "\tlink-status: Good ",
    "\t\tsupported: Good, Bad",
)


def build_report(*lines: str) -> bytes:
    """Join lines into a report, newline-terminated."""
    return ("\n".join(lines) + "\n").encode("utf-8")


@pytest.fixture
def sample_report() -> bytes:
    """A laptop panel, an external monitor and a disconnected port."""
    return build_report(*SAMPLE_LINES)


@pytest.fixture
def make_report() -> Callable[..., bytes]:
    """Build a report from output lines, prefixed with the screen header."""

    def make(*lines: str) -> bytes:
        return build_report(HEADER, *lines)

    return make


@pytest.fixture
def legend() -> str:
    return LEGEND


@pytest.fixture
def default_config():
    """Start and finish with the default parse configuration."""
    reset_parse_config()
    yield
    reset_parse_config()
