import numpy as np
import pytest
from kinematics.core.integrators import first_integral, second_integral
from kinematics.vector import Vector


def test_first_integral_works_with_floats():
    """Δx = v·t: 4 * 0.5 = 2."""
    assert first_integral(0.5, 4.0) == pytest.approx(2.0)


def test_first_integral_works_with_vectors():
    x = first_integral(0.5, Vector(1.0, 2.0, 3.0))
    assert isinstance(x, Vector)
    assert tuple(x) == pytest.approx((0.5, 1.0, 1.5))


def test_second_integral_works_with_floats():
    """Δx = ½·a·t²: 0.5 * 4 * 0.25 = 0.5."""
    assert second_integral(0.5, 4.0) == pytest.approx(0.5)


def test_second_integral_works_with_vectors():
    x = second_integral(0.5, Vector(8.0, 16.0, 24.0))
    assert isinstance(x, Vector)
    assert tuple(x) == pytest.approx((1.0, 2.0, 3.0))


def test_integrals_work_with_numpy_arrays():
    rate = np.array([2.0, -4.0, 6.0])
    assert first_integral(0.25, rate) == pytest.approx(np.array([0.5, -1.0, 1.5]))
    assert second_integral(2.0, rate) == pytest.approx(np.array([4.0, -8.0, 12.0]))


def test_zero_timestep_gives_zero_change():
    a = Vector(3.0, -1.0, 9.81)
    assert first_integral(0.0, a) == Vector()
    assert second_integral(0.0, a) == Vector()
    assert first_integral(0.0, 7.0) == 0.0


def test_integrals_do_not_mutate_rate():
    a = Vector(1.0, 2.0, 3.0)
    first_integral(2.0, a)
    second_integral(2.0, a)
    assert a == Vector(1.0, 2.0, 3.0)


def test_second_integral_is_integral_of_first():
    """
    Integrating a·t from 0 to T by midpoint rule (exact for linear integrands)
    gives ½·a·T².
    """
    a = 3.7
    T = 1.3
    n = 1000
    h = T / n
    total = sum(first_integral((i + 0.5) * h, a) * h for i in range(n))
    assert total == pytest.approx(second_integral(T, a), rel=1e-9)
