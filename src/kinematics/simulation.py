# MIT License (see LICENSE)
"""
Fixed-step simulation driver for a single particle.

The particle state evolves by repeated application of Particle.update:
    state[n+1] = state[n].update(dt, a[n])

Two entry points are provided:
    - trajectory(): a generator over states for a caller-supplied
      sequence of accelerations.
    - Simulation: a small configured loop with a fixed timestep and a
      constant acceleration, tracking elapsed simulation time.

Structure:
    - User creates a Simulation (or uses trajectory directly).
    - User calls sim.step(particle) in a loop, or sim.run(particle, n).
    - Each call returns new Particle values; inputs are never modified.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator
from numbers import Integral
import logging
import math

from .constants import EARTH_GRAVITY
from .types import Particle
from .vector import Vector

logger = logging.getLogger(__name__)


def trajectory(
    particle: Particle,
    dt: float,
    accelerations: Iterable[Vector],
) -> Iterator[Particle]:
    """
    Yield successive particle states, one per acceleration.

    The initial state is not yielded. Each acceleration is held constant
    over its step.

    Args:
        particle: Initial state.
        dt: Timestep in seconds, shared by every step.
        accelerations: Acceleration for each step, in m/s².
    """
    state = particle
    for a in accelerations:
        state = state.update(dt, a)
        yield state


@dataclass
class Simulation:
    """
    Fixed-step loop advancing a particle under constant acceleration.

    Attributes:
        dt: Timestep in seconds (default: 1/240). Must be finite.
        acceleration: Acceleration applied every step
                      (default: Earth gravity along -z).
        time: Elapsed simulation time in seconds.
    """
    dt: float = 1/240
    acceleration: Vector = field(default_factory=lambda: EARTH_GRAVITY)
    time: float = 0.0

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not math.isfinite(self.dt):
            raise ValueError(f"dt must be finite, got {self.dt}")
        if not isinstance(self.acceleration, Vector):
            raise TypeError(f"acceleration must be a Vector, got {type(self.acceleration)}")

    def step(self, particle: Particle) -> Particle:
        """
        Advance the particle by one timestep.

        Returns the new state and advances self.time by dt.
        """
        nxt = particle.update(self.dt, self.acceleration)
        self.time += self.dt
        return nxt

    def run(self, particle: Particle, steps: int) -> list[Particle]:
        """
        Advance the particle for a number of steps.

        Args:
            particle: Initial state (left unchanged).
            steps: Number of steps to take, ≥ 0.

        Returns:
            States after each step, in order. Empty if steps is 0.
        """
        if isinstance(steps, bool) or not isinstance(steps, Integral) or steps < 0:
            raise ValueError(f"steps must be a non-negative integer, got {steps!r}")

        logger.debug("Running %d steps of dt=%g from t=%g", steps, self.dt, self.time)
        states = []
        state = particle
        for _ in range(int(steps)):
            state = self.step(state)
            states.append(state)
        return states
