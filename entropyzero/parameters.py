"""Parameter schemas from which control panels are generated."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from .color import srgba
from .vector import Vec3


class ParameterKind(Enum):
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    VEC3 = "vec3"
    COLOR = "color"
    ENUM = "enum"


@dataclass(frozen=True)
class ParameterValue:
    """A runtime value tagged with its kind; enum values are option indices."""

    kind: ParameterKind
    value: Any

    def as_float(self) -> Optional[float]:
        return self.value if self.kind is ParameterKind.FLOAT else None

    def as_int(self) -> Optional[int]:
        return self.value if self.kind is ParameterKind.INT else None

    def as_bool(self) -> Optional[bool]:
        return self.value if self.kind is ParameterKind.BOOL else None

    def as_vec3(self) -> Optional[Vec3]:
        return self.value if self.kind is ParameterKind.VEC3 else None


@dataclass(frozen=True)
class FloatParameter:
    """A floating-point slider."""

    id: str
    name: str
    description: str
    min: float
    max: float
    default: float
    step: Optional[float] = None
    unit: Optional[str] = None

    kind: ClassVar[ParameterKind] = ParameterKind.FLOAT

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, self.default)


@dataclass(frozen=True)
class IntParameter:
    """An integer slider."""

    id: str
    name: str
    description: str
    min: int
    max: int
    default: int

    kind: ClassVar[ParameterKind] = ParameterKind.INT

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, self.default)


@dataclass(frozen=True)
class BoolParameter:
    """A boolean toggle."""

    id: str
    name: str
    description: str
    default: bool

    kind: ClassVar[ParameterKind] = ParameterKind.BOOL

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, self.default)


@dataclass(frozen=True)
class Vec3Parameter:
    """A 3D vector input."""

    id: str
    name: str
    description: str
    default: tuple[float, float, float]
    unit: Optional[str] = None

    kind: ClassVar[ParameterKind] = ParameterKind.VEC3

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, Vec3(*self.default))


@dataclass(frozen=True)
class ColorParameter:
    """A colour picker; the default is RGBA."""

    id: str
    name: str
    description: str
    default: tuple[float, float, float, float]

    kind: ClassVar[ParameterKind] = ParameterKind.COLOR

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, srgba(*self.default))


@dataclass(frozen=True)
class EnumParameter:
    """A dropdown selection."""

    id: str
    name: str
    description: str
    options: tuple[str, ...]
    default_index: int

    kind: ClassVar[ParameterKind] = ParameterKind.ENUM

    def default_value(self) -> ParameterValue:
        return ParameterValue(self.kind, self.default_index)


ParameterDef = Union[
    FloatParameter,
    IntParameter,
    BoolParameter,
    Vec3Parameter,
    ColorParameter,
    EnumParameter,
]