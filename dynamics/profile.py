"""
profile.py
----------
Record and inspect the motion of an AxisController over a fixed-step run.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from dynamics.axis_controller import AxisController


@dataclass
class MotionProfile:
    """Sampled motion of one axis: one row per frame, plus the starting state."""
    time:     np.ndarray   # seconds since the start of the recording
    position: np.ndarray
    speed:    np.ndarray

    def __len__(self) -> int:
        return len(self.time)

    @property
    def peak_speed(self) -> float:
        return float(self.speed.max())

    @property
    def final_position(self) -> float:
        return float(self.position[-1])

    def overshoot(self, target: float) -> float:
        """How far the axis went past *target*, in the direction of travel (0 if never)."""
        if self.position[0] <= target:
            beyond = self.position - target
        else:
            beyond = target - self.position
        return float(max(beyond.max(), 0.0))

    def settle_time(self, target: float, tolerance: float = 1e-9) -> float | None:
        """
        Time after which the position stays within *tolerance* of *target*.

        None if the axis had not settled by the end of the recording.
        """
        outside = np.abs(self.position - target) > tolerance
        if not outside.any():
            return float(self.time[0])
        last_outside = int(np.flatnonzero(outside)[-1])
        if last_outside == len(self.time) - 1:
            return None
        return float(self.time[last_outside + 1])


def record_profile(axis: AxisController, elapsed_ms: float, frames: int) -> MotionProfile:
    """Call ``axis.update(elapsed_ms)`` *frames* times and record the result."""
    if frames < 0:
        raise ValueError("frames must not be negative.")
    time = np.arange(frames + 1) * (elapsed_ms / 1000.0)
    position = np.empty(frames + 1)
    speed = np.empty(frames + 1)
    position[0] = axis.current
    speed[0] = axis.current_speed
    for i in range(1, frames + 1):
        axis.update(elapsed_ms)
        position[i] = axis.current
        speed[i] = axis.current_speed
    return MotionProfile(time=time, position=position, speed=speed)
