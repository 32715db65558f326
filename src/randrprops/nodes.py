"""Typed result model for randrprops.

All model types are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: a parse result can be shared freely once returned
- Pattern matching: Python 3.10+ match statements work naturally

Model Hierarchy:
PropsOutput
└── Output
    ├── Resolution, Position, Dimensions
    ├── properties (read-only mapping)
    └── OutputMode
        └── Rate

Thread Safety:
All model objects are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class Rotation(Enum):
    """Output rotation, as spelled in the report."""

    NORMAL = "normal"
    LEFT = "left"
    INVERTED = "inverted"
    RIGHT = "right"


class Reflection(Enum):
    """Output reflection axis."""

    NONE = "none"
    X_AXIS = "x"
    Y_AXIS = "y"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Pixel size. Report: 1920x1080"""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True, slots=True)
class Position:
    """Offset in virtual-screen coordinates. Report: +1920+0"""

    offset_x: int
    offset_y: int


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Physical size in millimetres. Report: 310mm x 170mm"""

    width_mm: int = 0
    height_mm: int = 0


@dataclass(frozen=True, slots=True)
class Rate:
    """Refresh rate of a mode.

    Report: 60.00*+ (current and preferred)

    """

    value: float
    is_current: bool = False
    is_preferred: bool = False


@dataclass(frozen=True, slots=True)
class OutputMode:
    """A supported resolution with its refresh rates, in report order."""

    resolution: Resolution
    rates: tuple[Rate, ...] = ()

    @property
    def is_current(self) -> bool:
        return any(rate.is_current for rate in self.rates)

    @property
    def is_preferred(self) -> bool:
        return any(rate.is_preferred for rate in self.rates)


def _empty_properties() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Output:
    """One display output block of the report.

    Resolution and position are only set for enabled outputs. Dimensions
    are zero-valued when the report does not state them.

    Hashable: properties are hashed by their items, so outputs can key
    dicts and sets like every other model type.

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
    properties: Mapping[str, str] = field(default_factory=_empty_properties)
    modes: tuple[OutputMode, ...] = ()

    @property
    def current_mode(self) -> OutputMode | None:
        """First mode holding the current rate, if any."""
        for mode in self.modes:
            if mode.is_current:
                return mode
        return None

    @property
    def preferred_mode(self) -> OutputMode | None:
        """First mode holding a preferred rate, if any."""
        for mode in self.modes:
            if mode.is_preferred:
                return mode
        return None

    def __hash__(self) -> int:
        return hash(
            (
                self.name,
                self.is_connected,
                self.is_primary,
                self.is_enabled,
                self.resolution,
                self.position,
                self.rotation,
                self.reflection,
                self.dimensions,
                frozenset(self.properties.items()),
                self.modes,
            )
        )


@dataclass(frozen=True, slots=True)
class PropsOutput:
    """Parse result: every output in report order.

    Order matters. It follows the order the query tool reports outputs in,
    which fingerprints and diffs rely on.

    """

    outputs: tuple[Output, ...] = ()

    def __iter__(self) -> Iterator[Output]:
        return iter(self.outputs)

    def __len__(self) -> int:
        return len(self.outputs)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(output.name for output in self.outputs)

    @property
    def connected(self) -> tuple[Output, ...]:
        """Connected outputs, in report order."""
        return tuple(output for output in self.outputs if output.is_connected)

    def find(self, name: str) -> Output | None:
        """Return the first output called name, or None."""
        for output in self.outputs:
            if output.name == name:
                return output
        return None
