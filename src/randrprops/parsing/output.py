"""Output status line parsing.

Handles the first line of each output block:

    eDP-1 connected primary 1920x1080+0+0 left x axis (normal left inverted right x axis y axis) 310mm x 170mm
    HDMI-1 disconnected (normal left inverted right x axis y axis)

Every clause after the name is optional except the rotation legend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from randrprops.errors import ParseError
from randrprops.lexer.modes import LexerContext
from randrprops.nodes import Dimensions, Position, Reflection, Rotation
from randrprops.parsing.builder import OutputBuilder
from randrprops.parsing.patterns import match_current_resolution, match_physical_dimension
from randrprops.tokens import TokenType

if TYPE_CHECKING:
    from randrprops.nodes import Output
    from randrprops.tokens import Token

ROTATION_KEYWORDS: tuple[str, ...] = tuple(rotation.value for rotation in Rotation)

# The legend is always the same constant list.
ROTATION_LEGEND: tuple[str, ...] = (
    "normal",
    "left",
    "inverted",
    "right",
    "x",
    "axis",
    "y",
    "axis",
)

_REFLECTION_AXES: dict[str, Reflection] = {
    "x": Reflection.X_AXIS,
    "X": Reflection.X_AXIS,
    "y": Reflection.Y_AXIS,
    "Y": Reflection.Y_AXIS,
}


class OutputParsingMixin:
    """Mixin for output blocks and their status line.

    Required Host Attributes:
        - _current: Token

    Required Host Methods:
        - _advance, _at, _expect, _accept (TokenNavigationMixin)
        - _parse_properties (PropertyParsingMixin)
        - _parse_modes (ModeParsingMixin)

    """

    _current: Token

    def _parse_output(self) -> Output:
        """Parse one output block: status line, properties, then modes.

        Raises:
            ParseError: If the block does not start with a name, or any
                required token of the status line is missing.
        """
        output = OutputBuilder(name=self._expect(TokenType.NAME).value)

        self._parse_output_status(output)
        self._parse_resolution_and_position(output)
        self._parse_rotation_and_reflection(output)
        self._parse_rotation_and_reflection_key()
        self._parse_output_dimensions(output)
        self._parse_properties(output)
        self._parse_modes(output)

        return output.build()

    def _parse_output_status(self, output: OutputBuilder) -> None:
        """connected [primary] | disconnected | unknown connection"""
        if self._accept(TokenType.NAME, "connected"):
            output.is_connected = True
            if self._accept(TokenType.NAME, "primary"):
                output.is_primary = True
        elif self._accept(TokenType.NAME, "disconnected"):
            output.is_connected = False
        elif self._accept(TokenType.NAME, "unknown"):
            self._expect(TokenType.NAME, "connection")

    def _parse_resolution_and_position(self, output: OutputBuilder) -> None:
        """<w>x<h>[i]+<x>+<y>, present only on enabled outputs.

        A name that is not a resolution is left for the next production.
        """
        if not self._at(TokenType.NAME):
            return

        match = match_current_resolution(self._current.value)
        if not match:
            return

        self._advance()
        output.is_enabled = True
        output.resolution = match.value
        offset_x = self._parse_offset()
        offset_y = self._parse_offset()
        output.position = Position(offset_x, offset_y)

    def _parse_offset(self) -> int:
        """Plus sign and integer. Negative offsets are printed as "+-10"."""
        self._expect(TokenType.PUNCTUATOR, "+")
        sign = -1 if self._accept(TokenType.PUNCTUATOR, "-") else 1
        return sign * int(self._expect(TokenType.INT_VALUE).value)

    def _parse_rotation_and_reflection(self, output: OutputBuilder) -> None:
        rotation = self._accept(TokenType.NAME, *ROTATION_KEYWORDS)
        if rotation is not None:
            output.rotation = Rotation(rotation.value)

        axis = self._accept(TokenType.NAME, *_REFLECTION_AXES)
        if axis is not None and self._accept(TokenType.NAME, "axis"):
            output.reflection = _REFLECTION_AXES[axis.value]

    def _parse_rotation_and_reflection_key(self) -> None:
        """(normal left inverted right x axis y axis)"""
        self._expect(TokenType.PUNCTUATOR, "(")
        for keyword in ROTATION_LEGEND:
            self._expect(TokenType.NAME, keyword)
        self._expect(TokenType.PUNCTUATOR, ")")

    def _parse_output_dimensions(self, output: OutputBuilder) -> None:
        """<w>mm x <h>mm, then step onto the property block.

        The line terminator is consumed with whitespace significant, so the
        current token ends up on the first token of the next line.
        """
        if self._at(TokenType.NAME):
            width = self._parse_output_dimension()
            self._expect(TokenType.NAME, "x")
            height = self._parse_output_dimension()
            output.dimensions = Dimensions(width, height)

        if self._at(TokenType.LINE_TERMINATOR):
            self._advance(LexerContext.SIGNIFICANT_WHITESPACE)

    def _parse_output_dimension(self) -> int:
        token = self._current
        match = match_physical_dimension(token.value) if token.type is TokenType.NAME else None
        if not match:
            raise ParseError.unexpected(token, TokenType.NAME, description="<n>mm")
        self._advance()
        return match.value
