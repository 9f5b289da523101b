"""
axis_math_test.py
-----------------
Bounds and clamp helpers.
"""
import math

import pytest

from axis_math import Bounds, clamp


def test_clamp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.5, 0.0, 1.0) == 0.5
    assert clamp(1e300, -math.inf, math.inf) == 1e300


def test_default_bounds_are_unbounded():
    b = Bounds()
    assert b.clamp(-1e12) == -1e12
    assert b.to_dict() == {"min": None, "max": None}


def test_bounded():
    b = Bounds(-1.0, 2.0)
    assert b.clamp(2.0) == 2.0
    assert b.clamp(3.0) == 2.0
    assert b.to_dict() == {"min": -1.0, "max": 2.0}


@pytest.mark.parametrize("lo, hi", [(1.0, 0.0), (math.nan, 1.0)])
def test_invalid_bounds(lo, hi):
    with pytest.raises(ValueError):
        Bounds(lo, hi)


@pytest.mark.parametrize("value, expected", [
    (None, Bounds()),
    ((0, 10), Bounds(0.0, 10.0)),
    ([None, 5], Bounds(-math.inf, 5.0)),
    ({"min": -2}, Bounds(-2.0, math.inf)),
    ({}, Bounds()),
])
def test_coerce(value, expected):
    assert Bounds.coerce(value) == expected


def test_coerce_rejects_wrong_arity():
    with pytest.raises(ValueError):
        Bounds.coerce((1.0, 2.0, 3.0))
