import math

import pytest

from entropyzero.integrators import (
    euler_integrate,
    rk4_integrate,
    semi_implicit_euler,
    verlet_integrate,
)
from entropyzero.vector import Vec3

GRAVITY = Vec3(0.0, -10.0, 0.0)


def test_euler_free_fall():
    pos, vel = Vec3.ZERO, Vec3.ZERO
    for _ in range(100):
        pos, vel = euler_integrate(pos, vel, GRAVITY, 0.01)
    assert abs(vel.y - (-10.0)) < 0.1
    assert abs(pos.y - (-5.0)) < 0.5


def test_semi_implicit_matches_euler_step():
    pos, vel = Vec3(1, 2, 3), Vec3(0.5, 0, -1)
    assert semi_implicit_euler(pos, vel, GRAVITY, 0.1) == euler_integrate(
        pos, vel, GRAVITY, 0.1
    )


def test_verlet_is_exact_for_constant_acceleration():
    pos, vel = Vec3.ZERO, Vec3.ZERO
    for _ in range(100):
        pos, vel = verlet_integrate(pos, vel, GRAVITY, GRAVITY, 0.01)
    assert vel.y == pytest.approx(-10.0)
    assert pos.y == pytest.approx(-5.0)
    assert pos.x == 0.0


def test_rk4_is_exact_for_constant_acceleration():
    pos, vel = Vec3.ZERO, Vec3(1.0, 0.0, 0.0)
    for _ in range(10):
        pos, vel = rk4_integrate(pos, vel, 0.1, lambda p, v: GRAVITY)
    assert vel.y == pytest.approx(-10.0)
    assert pos.y == pytest.approx(-5.0)
    assert pos.x == pytest.approx(1.0)


def test_rk4_harmonic_oscillator_quarter_period():
    pos, vel = Vec3(1.0, 0.0, 0.0), Vec3.ZERO
    steps = 1000
    dt = (math.pi / 2) / steps
    for _ in range(steps):
        pos, vel = rk4_integrate(pos, vel, dt, lambda p, v: -p)
    assert pos.x == pytest.approx(0.0, abs=1e-9)
    assert vel.x == pytest.approx(-1.0, abs=1e-9)


def test_rk4_conserves_energy_better_than_euler():
    def energy(p, v):
        return p.length_squared() + v.length_squared()

    rk_p, rk_v = Vec3(1.0, 0.0, 0.0), Vec3.ZERO
    eu_p, eu_v = rk_p, rk_v
    for _ in range(200):
        rk_p, rk_v = rk4_integrate(rk_p, rk_v, 0.05, lambda p, v: -p)
        eu_p, eu_v = euler_integrate(eu_p, eu_v, -eu_p, 0.05)
    assert abs(energy(rk_p, rk_v) - 1.0) < abs(energy(eu_p, eu_v) - 1.0)