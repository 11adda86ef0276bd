# MIT License (see LICENSE)
"""
Closed-form time integrals for constant rates.

When a quantity changes at a constant rate over a timestep, its change
has an exact polynomial form, so no sub-stepping is needed:
    Δx = v·dt              (first integral of a constant rate v)
    Δx = ½·a·dt²           (second integral of a constant rate-of-rate a)

Both functions are generic: they work with anything that supports
multiplication by a real scalar on the right, such as floats, Vector
instances and numpy arrays.

Reference:
    Equations of motion under constant acceleration:
    https://en.wikipedia.org/wiki/Equations_of_motion#Constant_translational_acceleration_in_a_straight_line
"""
from __future__ import annotations
from typing import TypeVar

T = TypeVar("T")


def first_integral(dt: float, rate: T) -> T:
    """
    Change accumulated by a constant rate over dt.

    Implements Δx = rate · dt. Used for the velocity contribution to
    position and the acceleration contribution to velocity.

    Args:
        dt: Timestep in seconds.
        rate: Constant first derivative (scalar or vector).
    """
    return rate * dt


def second_integral(dt: float, rate2: T) -> T:
    """
    Change accumulated by a constant second derivative over dt.

    Implements Δx = ½ · rate2 · dt², the acceleration contribution to
    position.

    Args:
        dt: Timestep in seconds.
        rate2: Constant second derivative (scalar or vector).
    """
    return rate2 * (0.5 * dt * dt)
