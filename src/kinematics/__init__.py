# MIT License (see LICENSE)
"""
kinematics - Closed-form constant-acceleration kinematics for a particle.

This package provides an immutable 3D vector algebra, exact time
integrals for constant rates, and a spherical particle state that
advances analytically under constant acceleration.

Main entry points:
    - Vector: Immutable 3-component vector with operator algebra.
    - Particle: Position, velocity and radius; update() returns the next state.
    - Simulation: Fixed-step driver with a constant acceleration.

Submodules:
    - vector: Vector type and named algebra functions (add, dot, unit, ...).
    - core: Integrators and conserved-quantity helpers.
    - constants: Standard gravity.
    - simulation: Trajectory generator and Simulation loop.

Example:
    from kinematics import Particle, Vector

    ball = Particle.make_with_radius(1.0)
    ball = ball.update(10.0, Vector(0.0, 0.0, -9.81))
    print(ball.position)   # Vector(x=0.0, y=0.0, z=-490.5)
"""
from .vector import Vector
from .types import Particle
from .core.integrators import first_integral, second_integral
from .simulation import Simulation, trajectory
from .constants import EARTH_GRAVITY, STANDARD_GRAVITY

__all__ = [
    # Values
    "Vector",
    "Particle",
    # Integrators
    "first_integral",
    "second_integral",
    # Simulation
    "Simulation",
    "trajectory",
    # Constants
    "EARTH_GRAVITY",
    "STANDARD_GRAVITY",
]
