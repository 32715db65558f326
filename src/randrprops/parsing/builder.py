"""Mutable accumulator for one output while its block is being parsed."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from randrprops.nodes import (
    Dimensions,
    Output,
    OutputMode,
    Position,
    Reflection,
    Resolution,
    Rotation,
)


@dataclass
class OutputBuilder:
    """Fields of an Output, filled in production by production.

    Frozen into an Output by build() once the block is complete.

    """

    name: str
    is_connected: bool = False
    is_primary: bool = False
    is_enabled: bool = False
    resolution: Resolution | None = None
    position: Position | None = None
    rotation: Rotation = Rotation.NORMAL
    reflection: Reflection = Reflection.NONE
    dimensions: Dimensions = field(default_factory=Dimensions)
    properties: dict[str, str] = field(default_factory=dict)
    modes: list[OutputMode] = field(default_factory=list)

    def build(self) -> Output:
        return Output(
            name=self.name,
            is_connected=self.is_connected,
            is_primary=self.is_primary,
            is_enabled=self.is_enabled,
            resolution=self.resolution,
            position=self.position,
            rotation=self.rotation,
            reflection=self.reflection,
            dimensions=self.dimensions,
            properties=MappingProxyType(dict(self.properties)),
            modes=tuple(self.modes),
        )
