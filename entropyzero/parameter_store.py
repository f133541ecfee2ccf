"""Current parameter values of a running simulation, seeded from its schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any, Iterable, Optional

from .color import Color
from .mathutils import clamp
from .parameters import (
    EnumParameter,
    FloatParameter,
    IntParameter,
    ParameterDef,
    ParameterKind,
    ParameterValue,
)
from .vector import Vec3


@dataclass
class SimulationParameters:
    """Parameter values keyed by parameter id."""

    values: dict[str, ParameterValue] = field(default_factory=dict)
    definitions: dict[str, ParameterDef] = field(default_factory=dict)

    @classmethod
    def from_defs(cls, defs: Iterable[ParameterDef]) -> SimulationParameters:
        """Start every parameter at its default."""
        defs = list(defs)
        return cls(
            values={d.id: d.default_value() for d in defs},
            definitions={d.id: d for d in defs},
        )

    def get_float(self, param_id: str) -> Optional[float]:
        """The float value of a parameter, or None if absent or not a float."""
        value = self.values.get(param_id)
        return value.as_float() if value is not None else None

    def get_bool(self, param_id: str) -> Optional[bool]:
        """The boolean value of a parameter, or None if absent or not a bool."""
        value = self.values.get(param_id)
        return value.as_bool() if value is not None else None

    def set(self, param_id: str, raw: Any) -> None:
        """Change a parameter as its control would, keeping it within range."""
        try:
            current = self.values[param_id]
        except KeyError:
            raise KeyError(f"unknown parameter {param_id!r}") from None
        value = _coerce(current.kind, raw, self.definitions.get(param_id))
        self.values[param_id] = ParameterValue(current.kind, value)


def _coerce(kind: ParameterKind, raw: Any, definition: Optional[ParameterDef]) -> Any:
    if kind is ParameterKind.FLOAT:
        if isinstance(raw, bool) or not isinstance(raw, Real):
            raise TypeError(f"expected a number, got {raw!r}")
        value = float(raw)
        if isinstance(definition, FloatParameter):
            value = clamp(value, definition.min, definition.max)
        return value
    if kind is ParameterKind.INT:
        if isinstance(raw, bool) or not isinstance(raw, Integral):
            raise TypeError(f"expected an integer, got {raw!r}")
        value = int(raw)
        if isinstance(definition, IntParameter):
            value = min(max(value, definition.min), definition.max)
        return value
    if kind is ParameterKind.BOOL:
        if not isinstance(raw, bool):
            raise TypeError(f"expected a bool, got {raw!r}")
        return raw
    if kind is ParameterKind.VEC3:
        if isinstance(raw, Vec3):
            return raw
        components = tuple(float(c) for c in raw)
        if len(components) != 3:
            raise ValueError(f"expected three components, got {len(components)}")
        return Vec3(*components)
    if kind is ParameterKind.COLOR:
        if not isinstance(raw, Color):
            raise TypeError(f"expected a Color, got {raw!r}")
        return raw
    if isinstance(raw, bool) or not isinstance(raw, Integral):
        raise TypeError(f"expected an option index, got {raw!r}")
    index = int(raw)
    if isinstance(definition, EnumParameter) and not 0 <= index < len(definition.options):
        raise ValueError(f"option index {index} out of range")
    return index


def control_label(definition: ParameterDef) -> str:
    """Label shown beside a parameter's control, with its unit when it has one."""
    unit = getattr(definition, "unit", None)
    if isinstance(definition, FloatParameter) and unit:
        return f"{definition.name} ({unit})"
    return definition.name