import math

import numpy as np
from kinematics.util import f64, norm, norm2


def test_f64_converts_sequences():
    arr = f64((1, 2, 3))
    assert arr.dtype == np.float64
    assert arr.tolist() == [1.0, 2.0, 3.0]


def test_norms_of_tuple_and_array():
    assert norm2((1.0, 2.0, 2.0)) == 9.0
    assert norm((1.0, 2.0, 2.0)) == 3.0
    assert norm(np.array([0.0, 3.0, 4.0])) == 5.0
    assert norm((0.0, 0.0, 0.0)) == 0.0


def test_norm_propagates_infinity():
    assert norm((math.inf, 0.0, 0.0)) == math.inf
