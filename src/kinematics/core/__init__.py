# MIT License (see LICENSE)
"""
Core kinematics components.

This subpackage provides:
    - Integrators: exact first and second time integrals of constant rates.
    - Invariants: per-unit-mass energy and momentum for verification.

Typical usage:
    from kinematics.core import first_integral, second_integral

    dv = first_integral(dt, acceleration)
    dx = second_integral(dt, acceleration)
"""
from .integrators import first_integral, second_integral
from .invariants import (
    specific_kinetic_energy,
    specific_potential_energy,
    specific_mechanical_energy,
    specific_momentum,
)

__all__ = [
    # Integrators
    "first_integral",
    "second_integral",
    # Invariants
    "specific_kinetic_energy",
    "specific_potential_energy",
    "specific_mechanical_energy",
    "specific_momentum",
]
