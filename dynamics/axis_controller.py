"""
axis_controller.py
------------------
Frame-driven kinematic controller for a single scalar view parameter
(yaw, pitch, zoom level, ...).

Usage:
    from dynamics import AxisController

    zoom = AxisController(on_change=print, minimum=0.0, maximum=100.0)
    zoom.max_speed = 50.0
    zoom.goto(80.0)
    while zoom.is_moving:
        zoom.update(16.0)     # once per rendered frame
    print(zoom.current)       # 80.0
"""
from __future__ import annotations

import enum
import math
from typing import Any, Callable, Optional

from axis_math import Bounds


class AxisMode(enum.Enum):
    """Control mode of an AxisController."""
    STOPPED = "stopped"
    ROLLING = "rolling"
    SEEKING = "seeking"


class AxisController:
    """
    Moves one scalar value toward a target with a trapezoidal speed profile.

    The value accelerates toward ``max_speed * speed_multiplier`` at twice
    that rate per second, cruises, then brakes symmetrically so it settles
    on the target without overshooting.  Nothing moves on its own: the
    owner calls ``update(elapsed_ms)`` once per frame.

    Modes
    -----
    STOPPED : speed ramps down to 0 (the value may still glide a little).
    SEEKING : heads for a finite target, stops on arrival.
    ROLLING : keeps going in one direction until stopped or a bound is hit.

    Parameters
    ----------
    on_change : callable | None  Called with the new value whenever ``update`` moves it.
    minimum   : float            Lower bound of the value (default -inf).
    maximum   : float            Upper bound of the value (default +inf).
    """

    # Ramp rate, in multiples of the top speed per second
    _ACCELERATION_FACTOR: float = 2.0

    def __init__(
        self,
        on_change: Optional[Callable[[float], Any]] = None,
        minimum: float = -math.inf,
        maximum: float = math.inf,
    ) -> None:
        self.on_change = on_change
        self._bounds = Bounds(minimum, maximum)

        self._mode = AxisMode.STOPPED
        self._max_speed: float = 0.0
        self._speed_multiplier: float = 1.0
        self._current_speed: float = 0.0   # always >= 0
        self._braking: bool = False        # inside the deceleration window on the last update

        start = self._bounds.clamp(0.0)
        self._current: float = start
        # Travel goal: a finite target, or +/-inf while rolling (and gliding after a roll)
        self._goal: float = start

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def max_speed(self) -> float:
        """Nominal top speed in units per second."""
        return self._max_speed

    @max_speed.setter
    def max_speed(self, value: float) -> None:
        if value < 0:
            raise ValueError("max_speed must not be negative.")
        self._max_speed = float(value)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def minimum(self) -> float:
        return self._bounds.minimum

    @property
    def maximum(self) -> float:
        return self._bounds.maximum

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def goto(self, position: float, speed_multiplier: float = 1.0) -> None:
        """Seek *position* (clamped to the bounds).  Current speed is kept.

        A NaN position is ignored.
        """
        if math.isnan(position):
            return
        self._mode = AxisMode.SEEKING
        self._goal = self._bounds.clamp(position)
        self._set_multiplier(speed_multiplier)

    def step(self, delta: float, speed_multiplier: float = 1.0) -> None:
        """
        Move the target by *delta*.

        While rolling (or still gliding after a roll) the step is taken from
        the present value rather than from the unreachable infinite goal.
        A NaN delta is ignored.
        """
        if math.isnan(delta):
            return
        if math.isinf(self._goal):
            self._goal = self._current
        self.goto(self._goal + delta, speed_multiplier)

    def roll(self, invert: bool = False, speed_multiplier: float = 1.0) -> None:
        """Start moving indefinitely upward (or downward if *invert*)."""
        self._mode = AxisMode.ROLLING
        self._goal = -math.inf if invert else math.inf
        self._set_multiplier(speed_multiplier)

    def stop(self) -> None:
        """Ramp down to a stop over the next updates."""
        self._mode = AxisMode.STOPPED

    def set_current(self, value: float) -> None:
        """Snap to *value* immediately and stop.  ``on_change`` is not called.

        A NaN value is ignored.
        """
        if math.isnan(value):
            return
        value = self._bounds.clamp(value)
        self._current = value
        self._goal = value
        self._mode = AxisMode.STOPPED
        self._current_speed = 0.0
        self._braking = False

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, elapsed_ms: float) -> bool:
        """
        Advance the simulation by *elapsed_ms* milliseconds.

        Returns True if the value changed (``on_change`` has then been called).
        """
        if elapsed_ms <= 0:
            return False
        dt = elapsed_ms / 1000.0
        top_speed = self._max_speed * self._speed_multiplier

        if top_speed == 0.0:
            # No usable speed, and no ramp rate to brake with either
            self._current_speed = 0.0
            self._braking = False
            if self._mode is AxisMode.SEEKING:
                self._mode = AxisMode.STOPPED
            return False

        # Deceleration window: brake now if we could not stop in time otherwise
        self._braking = False
        if self._mode is AxisMode.SEEKING:
            remaining = abs(self._goal - self._current)
            if remaining == 0.0 or remaining < self._braking_distance(top_speed):
                self._braking = True

        # Speed ramp
        if self._mode is AxisMode.STOPPED or self._braking:
            target_speed = 0.0
        else:
            target_speed = top_speed
        ramp = self._ACCELERATION_FACTOR * top_speed * dt
        if self._current_speed < target_speed:
            self._current_speed = min(target_speed, self._current_speed + ramp)
        elif self._current_speed > target_speed:
            self._current_speed = max(target_speed, self._current_speed - ramp)

        # Position integration, never past the goal
        previous = self._current
        nxt = previous
        if self._current_speed > 0.0:
            if previous > self._goal:
                nxt = max(self._goal, previous - self._current_speed * dt)
            elif previous < self._goal:
                nxt = min(self._goal, previous + self._current_speed * dt)
        nxt = self._bounds.clamp(nxt)

        if (self._mode is AxisMode.SEEKING
                and nxt == self._goal and self._current_speed == 0.0):
            self._mode = AxisMode.STOPPED
            self._braking = False

        if nxt == previous:
            return False
        self._current = nxt
        if self.on_change is not None:
            self.on_change(nxt)
        return True

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def mode(self) -> AxisMode:
        return self._mode

    @property
    def current(self) -> float:
        """Present value, always within the bounds."""
        return self._current

    @property
    def target(self) -> float:
        """
        Desired value, always within the bounds.

        While the goal is unbounded (rolling) this is the present value,
        which is where a ``step`` would be taken from.
        """
        if math.isinf(self._goal):
            return self._current
        return self._goal

    @property
    def direction(self) -> int:
        """+1 / -1 toward the goal, 0 when already on it."""
        if self._goal > self._current:
            return 1
        if self._goal < self._current:
            return -1
        return 0

    @property
    def speed_multiplier(self) -> float:
        return self._speed_multiplier

    @property
    def current_speed(self) -> float:
        """Instantaneous speed magnitude in units per second."""
        return self._current_speed

    @property
    def braking_distance(self) -> float:
        """Distance needed to ramp the present speed down to zero."""
        top_speed = self._max_speed * self._speed_multiplier
        if top_speed == 0.0:
            return 0.0
        return self._braking_distance(top_speed)

    @property
    def is_moving(self) -> bool:
        """True while rolling, seeking, or still ramping down."""
        return self._mode is not AxisMode.STOPPED or self._current_speed > 0.0

    @property
    def state(self) -> str:
        """Human-readable phase: 'idle', 'accelerating', 'cruising', or 'decelerating'."""
        top_speed = self._max_speed * self._speed_multiplier
        if (self._mode is AxisMode.STOPPED or self._braking
                or self._current_speed > top_speed or top_speed == 0.0):
            return "decelerating" if self._current_speed > 0.0 else "idle"
        if self._current_speed < top_speed:
            return "accelerating"
        return "cruising"

    def snapshot(self) -> dict[str, Any]:
        """Return JSON-serializable state for this axis."""
        return {
            "mode": self._mode.value,
            "state": self.state,
            "current": self._current,
            "target": self.target,
            "speed": self._current_speed,
            "max_speed": self._max_speed,
            "speed_multiplier": self._speed_multiplier,
            **self._bounds.to_dict(),
        }

    def __repr__(self) -> str:
        return (
            f"AxisController("
            f"mode={self._mode.value}, "
            f"current={self._current:.4f}, "
            f"target={self.target:.4f}, "
            f"speed={self._current_speed:.4f}/{self._max_speed:.4f})"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _set_multiplier(self, speed_multiplier: float) -> None:
        self._speed_multiplier = max(0.0, float(speed_multiplier))

    def _braking_distance(self, top_speed: float) -> float:
        # v^2 / (2 * a) with a = 2 * top_speed
        return self._current_speed * self._current_speed / (
            2.0 * self._ACCELERATION_FACTOR * top_speed
        )
