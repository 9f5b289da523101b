"""
main.py
-------
Demo script: drives a yaw / pitch / zoom camera rig in real time and prints
its values as they change.

Run with:
    python main.py [path/to/descriptor.json]
"""

import sys
import time
from pathlib import Path

from dynamics import CompositeController, FrameLoop

_DEFAULT_PRESET = Path(__file__).resolve().parent / "presets" / "camera.json"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _Printer:
    """Prints the camera values at most every 100 ms."""

    def __init__(self) -> None:
        self._t0 = time.perf_counter()
        self._last = -1.0
        self.camera: CompositeController | None = None

    def __call__(self, values: dict[str, float]) -> None:
        elapsed = time.perf_counter() - self._t0
        if self.camera is None or elapsed - self._last < 0.1:
            return
        self._last = elapsed
        # Speed bar of the fastest-moving axis, relative to its top speed
        ratio = max(
            axis.current_speed / (axis.max_speed * axis.speed_multiplier)
            if axis.max_speed * axis.speed_multiplier > 0 else 0.0
            for axis in self.camera.axes.values()
        )
        bar_len = min(int(ratio * 30), 30)
        bar = "█" * bar_len + "░" * (30 - bar_len)
        print(
            f"  t={elapsed:6.2f}s | yaw={values['yaw']:7.3f} "
            f"pitch={values['pitch']:6.3f} zoom={values['zoom']:6.2f} [{bar}]"
        )


def section(msg: str) -> None:
    print(f"\n{'─' * 58}")
    print(f"  {msg}")
    print(f"{'─' * 58}\n")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    preset = Path(sys.argv[1]) if len(sys.argv) > 1 else _DEFAULT_PRESET

    print("=" * 58)
    print("  Camera dynamics demo")
    print("=" * 58)

    printer = _Printer()
    camera = CompositeController.from_file(preset, on_change=printer)
    printer.camera = camera
    loop = FrameLoop(camera, fps=60.0)
    print(f"[demo] Loaded {preset.name}: {camera}")

    # ── 1. Roll yaw for 2 seconds ─────────────────────────────────
    section("Roll yaw for 2 s")
    camera.roll({"yaw": False})
    loop.run(2.0)
    camera.stop()
    loop.run_until_idle(timeout=5.0)
    print(f"\n  >> Stopped at yaw={camera['yaw'].current:.3f}")

    # ── 2. Look down and zoom in ──────────────────────────────────
    section("goto pitch=-0.8, zoom=55")
    camera.goto({"pitch": -0.8, "zoom": 55.0})
    loop.run_until_idle(timeout=10.0)
    print(f"\n  >> Arrived at {camera.values}")

    # ── 3. Step yaw back at double speed ──────────────────────────
    section("Step yaw by -1.0 at 2x speed")
    camera.step({"yaw": -1.0}, speed_multiplier=2.0)
    loop.run_until_idle(timeout=5.0)
    print(f"\n  >> Arrived at yaw={camera['yaw'].current:.3f}")

    # ── 4. Pitch rolls into its upper bound ───────────────────────
    section("Roll pitch up until the bound")
    camera.roll({"pitch": False})
    loop.run(3.0)
    print(f"\n  >> pitch={camera['pitch'].current:.4f} (max {camera['pitch'].maximum})")
    camera.stop()
    loop.run_until_idle(timeout=5.0)

    # ── 5. Snap back to the start ─────────────────────────────────
    section("set_current: reset view")
    camera.set_current({"yaw": 0.0, "pitch": 0.0, "zoom": 50.0})

    print(f"\n{'=' * 58}")
    print(f"  Demo complete.  Final values: {camera.values}")
    print(f"{'=' * 58}")


if __name__ == "__main__":
    main()
