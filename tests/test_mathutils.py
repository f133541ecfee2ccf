import math

import pytest

from entropyzero.mathutils import clamp, lerp, lerp_vec3, map_range, smoothstep
from entropyzero.vector import Vec3


def test_lerp():
    assert abs(lerp(0.0, 10.0, 0.5) - 5.0) < 1e-6


def test_map_range():
    assert abs(map_range(5.0, 0.0, 10.0, 0.0, 100.0) - 50.0) < 1e-6


def test_lerp_endpoints():
    assert lerp(3.0, 8.0, 0.0) == 3.0
    assert lerp(3.0, 8.0, 1.0) == 8.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-1.0, 0.0), (0.5, 0.5), (2.0, 1.0)],
)
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected


def test_clamp_nan_goes_to_minimum():
    assert clamp(math.nan, 0.0, 1.0) == 0.0


def test_clamp_with_inverted_bounds_returns_max():
    assert clamp(0.5, 1.0, 0.0) == 0.0


def test_lerp_vec3_midpoint():
    a = Vec3(0.0, 0.0, 0.0)
    b = Vec3(2.0, 4.0, -6.0)
    assert lerp_vec3(a, b, 0.5) == Vec3(1.0, 2.0, -3.0)
    assert lerp_vec3(a, b, 1.0) == b


def test_smoothstep_edges_and_midpoint():
    assert smoothstep(0.0, 1.0, -5.0) == 0.0
    assert smoothstep(0.0, 1.0, 5.0) == 1.0
    assert smoothstep(0.0, 1.0, 0.5) == pytest.approx(0.5)


def test_smoothstep_degenerate_edges_is_a_step():
    assert smoothstep(1.0, 1.0, 0.5) == 0.0
    assert smoothstep(1.0, 1.0, 1.0) == 0.0
    assert smoothstep(1.0, 1.0, 1.5) == 1.0


def test_map_range_round_trip():
    mapped = map_range(3.0, 0.0, 10.0, -1.0, 1.0)
    assert map_range(mapped, -1.0, 1.0, 0.0, 10.0) == pytest.approx(3.0)


def test_map_range_rejects_empty_source():
    with pytest.raises(ValueError):
        map_range(1.0, 2.0, 2.0, 0.0, 1.0)