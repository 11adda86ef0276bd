# MIT License (see LICENSE)
"""
Conserved quantities for checking particle motion.

A Particle carries no mass, so these are per-unit-mass ("specific")
quantities. In a uniform field g with no other acceleration, specific
mechanical energy is conserved:
    E = ½|v|² - g·x
Since update() integrates constant acceleration exactly, E should stay
constant across steps up to rounding error.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..vector import Vector, dot

if TYPE_CHECKING:
    from ..types import Particle


def specific_kinetic_energy(particle: Particle) -> float:
    """
    Kinetic energy per unit mass, ½|v|², in J/kg.
    """
    v = particle.velocity
    return 0.5 * dot(v, v)


def specific_potential_energy(particle: Particle, g: Vector) -> float:
    """
    Potential energy per unit mass in the uniform field g, -g·x, in J/kg.

    The zero of potential is at the origin.
    """
    return -dot(g, particle.position)


def specific_mechanical_energy(particle: Particle, g: Vector) -> float:
    """Sum of specific kinetic and potential energy."""
    return specific_kinetic_energy(particle) + specific_potential_energy(particle, g)


def specific_momentum(particles: list[Particle]) -> Vector:
    """
    Total momentum per unit mass, Σ v, of independent particles.

    Args:
        particles: Particles assumed to share the same mass.
    """
    total = Vector()
    for p in particles:
        total = total + p.velocity
    return total
