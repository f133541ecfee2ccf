from entropyzero.color import srgba
from entropyzero.parameters import (
    BoolParameter,
    ColorParameter,
    EnumParameter,
    FloatParameter,
    IntParameter,
    ParameterKind,
    ParameterValue,
    Vec3Parameter,
)
from entropyzero.vector import Vec3


def _gravity():
    return FloatParameter(
        id="gravity",
        name="Gravity",
        description="Gravitational acceleration",
        min=0.0,
        max=20.0,
        default=9.8,
        step=0.1,
        unit="m/s²",
    )


def test_parameter_id():
    assert _gravity().id == "gravity"


def test_parameter_name():
    assert _gravity().name == "Gravity"


def test_float_default_value():
    value = _gravity().default_value()
    assert value.kind is ParameterKind.FLOAT
    assert value.as_float() == 9.8
    assert value.as_int() is None


def test_int_default_value():
    p = IntParameter("particle_count", "Particle Count", "Number", 100, 1_000_000, 100_000)
    value = p.default_value()
    assert value.as_int() == 100_000
    assert value.as_float() is None


def test_bool_default_value():
    p = BoolParameter("paused", "Paused", "Pause the simulation", False)
    value = p.default_value()
    assert value.as_bool() is False
    assert value.as_vec3() is None


def test_vec3_default_value():
    p = Vec3Parameter("offset", "Offset", "Shift", (1.0, 2.0, 3.0), unit="m")
    assert p.default_value().as_vec3() == Vec3(1.0, 2.0, 3.0)


def test_color_default_value():
    p = ColorParameter("tint", "Tint", "Colour", (0.1, 0.2, 0.3, 0.4))
    value = p.default_value()
    assert value.kind is ParameterKind.COLOR
    assert value.value == srgba(0.1, 0.2, 0.3, 0.4)


def test_enum_default_value():
    p = EnumParameter("scheme", "Scheme", "Palette", ("a", "b", "c"), 2)
    value = p.default_value()
    assert value == ParameterValue(ParameterKind.ENUM, 2)
    assert p.options[value.value] == "c"


def test_kinds_are_distinct_per_definition_type():
    definitions = [
        _gravity(),
        IntParameter("count", "Count", "Number", 1, 10, 5),
        BoolParameter("paused", "Paused", "Pause", True),
        Vec3Parameter("offset", "Offset", "Shift", (0.0, 0.0, 0.0)),
        ColorParameter("tint", "Tint", "Colour", (1.0, 1.0, 1.0, 1.0)),
        EnumParameter("scheme", "Scheme", "Palette", ("a",), 0),
    ]
    kinds = [d.default_value().kind for d in definitions]
    assert kinds == [d.kind for d in definitions]
    assert set(kinds) == set(ParameterKind)
    assert len(kinds) == len(set(kinds))