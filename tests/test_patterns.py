"""Tests for the literal pattern matchers."""

import pytest

from randrprops.nodes import Resolution
from randrprops.parsing.patterns import (
    PatternMatch,
    match_current_resolution,
    match_mode_resolution,
    match_physical_dimension,
)


class TestCurrentResolution:
    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("1920x1080", Resolution(1920, 1080)),
            ("1920x1080i", Resolution(1920, 1080)),
            ("640x480", Resolution(640, 480)),
        ],
    )
    def test_matches(self, literal: str, expected: Resolution) -> None:
        match = match_current_resolution(literal)
        assert match
        assert match.value == expected

    @pytest.mark.parametrize(
        "literal", ["1920x", "x1080", "1920X1080", "1920x1080p", "310mm", "left", ""]
    )
    def test_rejects(self, literal: str) -> None:
        match = match_current_resolution(literal)
        assert not match
        assert match.value is None


class TestModeResolution:
    def test_interlaced_allowed_by_default(self) -> None:
        assert match_mode_resolution("1920x1080i").value == Resolution(1920, 1080)

    def test_interlaced_rejected_when_strict(self) -> None:
        assert not match_mode_resolution("1920x1080i", allow_interlaced=False)

    def test_plain_matches_when_strict(self) -> None:
        match = match_mode_resolution("1280x1024", allow_interlaced=False)
        assert match.value == Resolution(1280, 1024)

    @pytest.mark.parametrize("literal", ["HDMI-1", "1920x1080ii", "1920x1080+0"])
    def test_rejects(self, literal: str) -> None:
        assert not match_mode_resolution(literal)


class TestPhysicalDimension:
    @pytest.mark.parametrize(("literal", "expected"), [("310mm", 310), ("0mm", 0)])
    def test_matches(self, literal: str, expected: int) -> None:
        assert match_physical_dimension(literal) == PatternMatch(True, expected)

    @pytest.mark.parametrize("literal", ["mm", "310", "310cm", "31.0mm", "310mmx"])
    def test_rejects(self, literal: str) -> None:
        assert match_physical_dimension(literal) == PatternMatch(False)
