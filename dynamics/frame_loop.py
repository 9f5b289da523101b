"""
frame_loop.py
-------------
FrameLoop — drives a controller's ``update(elapsed_ms)`` once per frame
from a monotonic clock, the way a render loop would.

Everything runs on the calling thread; the controllers are not thread-safe
and must not be mutated from elsewhere while a loop is running.

Usage:
    loop = FrameLoop(camera, fps=60.0)
    camera.goto({"yaw": 1.0})
    loop.run_until_idle(timeout=5.0)
"""
from __future__ import annotations

import time
from typing import Callable, Optional, Protocol


class Updatable(Protocol):
    """Anything a FrameLoop can drive (AxisController, CompositeController)."""

    def update(self, elapsed_ms: float) -> bool:
        ...

    @property
    def is_moving(self) -> bool:
        ...


class FrameLoop:
    """
    Fixed-rate frame scheduler with variable time steps.

    Each ``tick()`` passes the wall time elapsed since the previous tick to
    the controller, so motion stays correct even when frames run late.

    Parameters
    ----------
    controller : Updatable  Controller to advance.
    fps        : float      Target frame rate for ``run`` (default 60).
    clock      : callable   Monotonic time source in seconds (default time.perf_counter).
    sleep      : callable   Sleep function in seconds (default time.sleep).
    """

    def __init__(
        self,
        controller: Updatable,
        fps: float = 60.0,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive.")
        self.controller = controller
        self._frame_interval = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._last_time = clock()
        self._frames = 0

    @property
    def frames(self) -> int:
        """Number of ticks since construction or the last ``reset()``."""
        return self._frames

    def reset(self) -> None:
        """Restart elapsed-time measurement from now."""
        self._last_time = self._clock()
        self._frames = 0

    def tick(self) -> bool:
        """Advance the controller by the time since the previous tick."""
        now = self._clock()
        elapsed_ms = (now - self._last_time) * 1000.0
        self._last_time = now
        self._frames += 1
        return self.controller.update(elapsed_ms)

    def run(self, duration: float) -> int:
        """Tick at the configured frame rate for *duration* seconds.

        Returns the number of frames rendered.
        """
        start = self._clock()
        frames = 0
        while self._clock() - start < duration:
            self._wait_for_frame()
            self.tick()
            frames += 1
        return frames

    def run_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Tick until the controller stops moving (or timeout expires).

        Returns True if the controller came to rest, False if it timed out.
        """
        start = self._clock()
        while self.controller.is_moving:
            if timeout is not None and self._clock() - start >= timeout:
                return False
            self._wait_for_frame()
            self.tick()
        return True

    def _wait_for_frame(self) -> None:
        remaining = self._last_time + self._frame_interval - self._clock()
        if remaining > 0:
            self._sleep(remaining)

    def __repr__(self) -> str:
        return (
            f"FrameLoop("
            f"fps={1.0 / self._frame_interval:.1f}, "
            f"frames={self._frames}, "
            f"controller={self.controller!r})"
        )
