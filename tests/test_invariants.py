import pytest
from kinematics.constants import EARTH_GRAVITY
from kinematics.core.invariants import (
    specific_kinetic_energy,
    specific_potential_energy,
    specific_mechanical_energy,
    specific_momentum,
)
from kinematics.types import Particle
from kinematics.vector import Vector


def test_kinetic_energy_per_unit_mass():
    p = Particle.make(Vector(), Vector(3.0, 4.0, 0.0), 1.0)
    assert specific_kinetic_energy(p) == pytest.approx(12.5)


def test_potential_energy_rises_with_height():
    """U = -g·x = 9.81 * z in a z-up frame."""
    p = Particle.make(Vector(0.0, 0.0, 10.0), Vector(), 1.0)
    assert specific_potential_energy(p, EARTH_GRAVITY) == pytest.approx(98.1)


def test_mechanical_energy_conserved_in_uniform_field():
    """
    Exact constant-acceleration integration conserves ½|v|² - g·x
    regardless of step size.
    """
    g = EARTH_GRAVITY
    p = Particle.make(Vector(0.0, 0.0, 50.0), Vector(12.0, -3.0, 25.0), 0.2)
    e0 = specific_mechanical_energy(p, g)

    for _ in range(1000):
        p = p.update(0.01, g)

    e1 = specific_mechanical_energy(p, g)
    print("energy", e0, "->", e1, "relerr", abs(e1 - e0) / abs(e0))
    assert e1 == pytest.approx(e0, rel=1e-9)


def test_momentum_is_sum_of_velocities():
    ps = [
        Particle.make(Vector(), Vector(1.0, 0.0, 0.0), 1.0),
        Particle.make(Vector(), Vector(0.0, 2.0, 0.0), 1.0),
        Particle.make(Vector(), Vector(-1.0, 0.0, 3.0), 1.0),
    ]
    assert specific_momentum(ps) == Vector(0.0, 2.0, 3.0)
    assert specific_momentum([]) == Vector()
