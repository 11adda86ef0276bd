# MIT License (see LICENSE)
"""
Particle state for constant-acceleration kinematics.

A Particle is a spherical point mass with extent, described by its
position, velocity and radius at one instant. It is an immutable value:
advancing time produces a new Particle via update() and leaves the old
one valid and unchanged.

The state advance is the exact solution of motion under constant
acceleration a over a timestep dt:
    x(t+dt) = x(t) + v(t)·dt + ½·a·dt²
    v(t+dt) = v(t) + a·dt
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .core.integrators import first_integral, second_integral
from .vector import Vector, zero


@dataclass(frozen=True)
class Particle:
    """
    A sphere moving under externally supplied acceleration.

    Attributes:
        position: Centre position in meters.
        velocity: Velocity in m/s.
        radius: Radius in meters. Carried through update() unchanged and
                not used by any kinematic calculation. Non-negative by
                convention; not validated.
    """
    position: Vector = field(default_factory=zero)
    velocity: Vector = field(default_factory=zero)
    radius: float = 0.0

    @classmethod
    def make(cls, position: Vector, velocity: Vector, radius: float) -> Particle:
        return cls(position=position, velocity=velocity, radius=radius)

    @classmethod
    def make_default(cls) -> Particle:
        """Particle at rest at the origin with zero radius."""
        return cls()

    @classmethod
    def make_with_radius(cls, radius: float) -> Particle:
        """Particle at rest at the origin with the given radius."""
        return cls(radius=radius)

    def update(self, dt: float, acceleration: Vector) -> Particle:
        """
        Advance the state by dt under constant acceleration.

        Position and velocity are both derived from the current state, so
        the position term uses the pre-update velocity (this is not
        semi-implicit Euler). With dt = 0 the state is returned unchanged.

        Args:
            dt: Timestep in seconds.
            acceleration: Acceleration held constant over the step, in m/s².

        Returns:
            A new Particle; self is not modified.
        """
        position = (
            self.position
            + first_integral(dt, self.velocity)
            + second_integral(dt, acceleration)
        )
        velocity = self.velocity + first_integral(dt, acceleration)
        return Particle(position=position, velocity=velocity, radius=self.radius)
