# MIT License (see LICENSE)
"""
Physical constants used by the examples and the simulation driver.

Values use SI units. The coordinate convention is z-up, so gravity points
along -z.
"""
from __future__ import annotations

from .vector import Vector

# Magnitude of surface gravity, rounded to 9.81 m/s² (standard value 9.80665).
STANDARD_GRAVITY: float = 9.81

# Uniform downward gravitational acceleration in a z-up frame.
EARTH_GRAVITY: Vector = Vector(0.0, 0.0, -STANDARD_GRAVITY)
