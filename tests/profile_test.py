"""
profile_test.py
---------------
Recorded motion profiles of an AxisController.
"""
import numpy as np
import pytest

from dynamics import AxisController, record_profile


@pytest.fixture
def axis() -> AxisController:
    a = AxisController()
    a.max_speed = 1.0
    return a


def test_trapezoidal_profile(axis):
    axis.goto(2.0)
    profile = record_profile(axis, elapsed_ms=16.0, frames=1000)

    assert len(profile) == 1001
    assert profile.time[1] == pytest.approx(0.016)
    assert profile.peak_speed == pytest.approx(1.0)
    assert profile.overshoot(2.0) == 0.0
    assert profile.final_position == 2.0
    assert np.all(np.diff(profile.position) >= 0.0)
    # accelerate and brake at 2 units/s^2: at least 2 s to cover 2 units
    assert profile.settle_time(2.0) >= 2.0
    assert profile.speed[-1] == 0.0


def test_profile_from_above(axis):
    axis.set_current(1.0)
    axis.goto(0.0)
    profile = record_profile(axis, elapsed_ms=10.0, frames=1000)

    assert profile.overshoot(0.0) == 0.0
    assert np.all(np.diff(profile.position) <= 0.0)


def test_settle_time_none_when_unfinished(axis):
    axis.goto(5.0)
    profile = record_profile(axis, elapsed_ms=16.0, frames=10)
    assert profile.settle_time(5.0) is None


def test_settle_time_zero_when_already_there(axis):
    profile = record_profile(axis, elapsed_ms=16.0, frames=5)
    assert profile.settle_time(0.0) == 0.0


def test_rolling_speed_reaches_max(axis):
    axis.roll()
    profile = record_profile(axis, elapsed_ms=16.0, frames=100)
    assert np.all(np.diff(profile.position) > 0.0)
    assert profile.speed[-1] == 1.0
    assert profile.overshoot(0.0) > 0.0


def test_negative_frames_rejected(axis):
    with pytest.raises(ValueError):
        record_profile(axis, elapsed_ms=16.0, frames=-1)
