"""Tests for the spring-damper integrator and the numerical step functions."""

import numpy as np
import pytest

from tiltcurve.config import SimulationConfig
from tiltcurve.core import ControlPoint, Vector2
from tiltcurve.physics import (
    SpringIntegrator,
    damping_ratio,
    explicit_euler_step,
    semi_implicit_euler_step,
    spring_damper_acceleration,
)


def test_locked_point_is_identity() -> None:
    spring = SpringIntegrator()
    end = ControlPoint(
        position=Vector2(40.0, 400.0),
        velocity=Vector2(5.0, -3.0),
        target=Vector2(0.0, 0.0),
        locked=True,
    )
    for dt in (1 / 60, 0.5, 10.0):
        assert spring.integrate(end, dt) is end


def test_equilibrium_is_a_fixed_point() -> None:
    spring = SpringIntegrator()
    p = ControlPoint.free(123.25, -7.5)
    q = p
    for _ in range(100):
        q = spring.integrate(q, 1 / 60)
    assert q.position == p.position
    assert q.velocity == Vector2(0.0, 0.0)


def test_single_step_follows_semi_implicit_euler() -> None:
    spring = SpringIntegrator(stiffness=120.0, damping=16.0)
    p = ControlPoint(position=Vector2(0.0, 0.0), velocity=Vector2(1.0, 0.0), target=Vector2(10.0, -5.0))
    dt = 0.01
    q = spring.integrate(p, dt)
    ax = 10.0 * 120.0 - 1.0 * 16.0
    ay = -5.0 * 120.0
    vx, vy = 1.0 + ax * dt, ay * dt
    assert q.velocity.x == pytest.approx(vx)
    assert q.velocity.y == pytest.approx(vy)
    assert q.position.x == pytest.approx(vx * dt)
    assert q.position.y == pytest.approx(vy * dt)
    assert q.target == p.target
    # input untouched
    assert p.position == Vector2(0.0, 0.0)


def test_displaced_point_settles_on_target() -> None:
    spring = SpringIntegrator()
    target = Vector2(90.0, 260.0)
    p = ControlPoint(position=Vector2(50.0, 240.0), target=target)
    start_distance = p.position.distance_to(target)
    for _ in range(1000):
        p = spring.integrate(p, 1 / 60)
    assert p.position.distance_to(target) < start_distance
    assert p.position.distance_to(target) < 1e-6
    assert p.velocity.magnitude() < 1e-6


def test_default_spring_overshoots_before_settling() -> None:
    spring = SpringIntegrator()
    assert spring.damping_ratio < 1.0
    p = ControlPoint(position=Vector2(0.0, 0.0), target=Vector2(100.0, 0.0))
    xs = []
    for _ in range(120):
        p = spring.integrate(p, 1 / 60)
        xs.append(p.position.x)
    assert max(xs) > 100.0


def test_scheme_is_pluggable() -> None:
    p = ControlPoint(position=Vector2(0.0, 0.0), target=Vector2(10.0, 0.0))
    semi = SpringIntegrator(scheme=semi_implicit_euler_step).integrate(p, 0.1)
    explicit = SpringIntegrator(scheme=explicit_euler_step).integrate(p, 0.1)
    assert semi.velocity == explicit.velocity
    assert explicit.position == Vector2(0.0, 0.0)
    assert semi.position.x == pytest.approx(12.0)


def test_step_functions_accept_numpy_arrays() -> None:
    target = np.array([1.0, 2.0])

    def accel(x: np.ndarray, v: np.ndarray) -> np.ndarray:
        return spring_damper_acceleration(x, v, target, 120.0, 16.0)

    x, v = np.zeros(2), np.zeros(2)
    for _ in range(1000):
        x, v = semi_implicit_euler_step(accel, x, v, 1 / 60)
    np.testing.assert_allclose(x, target, atol=1e-6)


def test_from_config_and_validation() -> None:
    spring = SpringIntegrator.from_config(SimulationConfig(stiffness=50.0, damping=2.0))
    assert (spring.stiffness, spring.damping) == (50.0, 2.0)
    assert spring.natural_frequency == pytest.approx(np.sqrt(50.0))
    assert damping_ratio(100.0, 20.0) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        SpringIntegrator(stiffness=0.0)
    with pytest.raises(ValueError):
        SpringIntegrator(damping=-1.0)
