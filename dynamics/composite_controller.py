"""
composite_controller.py
-----------------------
CompositeController drives a fixed set of named AxisControllers as one
unit (e.g. a camera's yaw / pitch / zoom) and reports their values through
a single change callback per frame.

It can be constructed directly or from a descriptor dict (or JSON file):

    {
        "max_speed": 1.5,
        "axes": {
            "yaw":   {},
            "pitch": {"min": -1.5708, "max": 1.5708},
            "zoom":  {"min": 0, "max": 100, "current": 50}
        }
    }
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Optional, Union

from axis_math import Bounds
from dynamics.axis_controller import AxisController


class InvalidAxisError(KeyError):
    """Raised when an operation names an axis the controller does not own."""

    def __init__(self, names: Iterable[str], known: Iterable[str]) -> None:
        self.names = sorted(names)
        self.known = sorted(known)
        super().__init__(
            f"Unknown axis {', '.join(map(repr, self.names))}; "
            f"expected one of {', '.join(map(repr, self.known))}"
        )

    def __str__(self) -> str:
        return self.args[0]


class CompositeController:
    """
    A fixed set of named axes moved together.

    Control operations take sparse mappings: only the axes present are
    affected.  A mapping naming an unknown axis is rejected as a whole
    (InvalidAxisError) before any axis is touched.

    Parameters
    ----------
    axes      : mapping  Axis name -> bounds (None, a ``(min, max)`` pair, or Bounds).
    on_change : callable | None  Called once per ``update`` that moved anything,
                                 with ``{name: value}`` for every axis.
    """

    def __init__(
        self,
        axes: Mapping[str, Union[Bounds, tuple, None]],
        on_change: Optional[Callable[[dict[str, float]], Any]] = None,
    ) -> None:
        if not axes:
            raise ValueError("CompositeController needs at least one axis.")
        self.on_change = on_change
        self._max_speed: float = 0.0
        self._axes: dict[str, AxisController] = {}
        for name, bounds in axes.items():
            b = Bounds.coerce(bounds)
            self._axes[name] = AxisController(minimum=b.minimum, maximum=b.maximum)

    @classmethod
    def from_descriptor(
        cls,
        descriptor: dict,
        on_change: Optional[Callable[[dict[str, float]], Any]] = None,
    ) -> CompositeController:
        """Construct from a descriptor dict (see module docstring)."""
        if "axes" not in descriptor:
            raise ValueError("Descriptor is missing 'axes'.")
        axes_desc: dict = descriptor["axes"]
        composite = cls({name: Bounds.coerce(ad or {}) for name, ad in axes_desc.items()},
                        on_change=on_change)
        if "max_speed" in descriptor:
            composite.max_speed = float(descriptor["max_speed"])
        initial = {name: float(ad["current"])
                   for name, ad in axes_desc.items() if ad and "current" in ad}
        if initial:
            composite.set_current(initial)
        return composite

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        on_change: Optional[Callable[[dict[str, float]], Any]] = None,
    ) -> CompositeController:
        """Load a descriptor from a JSON file and construct a CompositeController."""
        with open(path) as f:
            return cls.from_descriptor(json.load(f), on_change=on_change)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def max_speed(self) -> float:
        """Top speed shared by every axis, in units per second."""
        return self._max_speed

    @max_speed.setter
    def max_speed(self, value: float) -> None:
        if value < 0:
            raise ValueError("max_speed must not be negative.")
        for axis in self._axes.values():
            axis.max_speed = value
        self._max_speed = float(value)

    @property
    def axes(self) -> Mapping[str, AxisController]:
        """Read-only view of the owned axes."""
        return MappingProxyType(self._axes)

    def __getitem__(self, name: str) -> AxisController:
        try:
            return self._axes[name]
        except KeyError:
            raise InvalidAxisError([name], self._axes) from None

    def __contains__(self, name: object) -> bool:
        return name in self._axes

    # ------------------------------------------------------------------
    # Control (fan-out)
    # ------------------------------------------------------------------

    def goto(self, positions: Mapping[str, float], speed_multiplier: float = 1.0) -> None:
        """Seek the given positions on the named axes."""
        for axis, position in self._resolve(positions):
            axis.goto(position, speed_multiplier)

    def step(self, deltas: Mapping[str, float], speed_multiplier: float = 1.0) -> None:
        """Move the targets of the named axes by the given deltas."""
        for axis, delta in self._resolve(deltas):
            axis.step(delta, speed_multiplier)

    def roll(self, rolls: Mapping[str, bool], speed_multiplier: float = 1.0) -> None:
        """Start rolling the named axes; a True value rolls downward."""
        for axis, invert in self._resolve(rolls):
            axis.roll(bool(invert), speed_multiplier)

    def stop(self) -> None:
        """Ramp every axis down to a stop."""
        for axis in self._axes.values():
            axis.stop()

    def set_current(self, values: Mapping[str, float]) -> None:
        """Snap the named axes to the given values (no change callback)."""
        for axis, value in self._resolve(values):
            axis.set_current(value)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, elapsed_ms: float) -> bool:
        """
        Advance every axis by *elapsed_ms* milliseconds.

        Calls ``on_change`` once with the values of all axes if any of them
        moved, and returns whether anything moved.
        """
        changed = False
        values: dict[str, float] = {}
        for name, axis in self._axes.items():
            changed |= axis.update(elapsed_ms)
            values[name] = axis.current

        if changed and self.on_change is not None:
            self.on_change(values)
        return changed

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def values(self) -> dict[str, float]:
        """Current value of every axis."""
        return {name: axis.current for name, axis in self._axes.items()}

    @property
    def is_moving(self) -> bool:
        return any(axis.is_moving for axis in self._axes.values())

    def snapshot(self) -> dict[str, Any]:
        """Return JSON-serializable state for every axis."""
        return {
            "max_speed": self._max_speed,
            "axes": {name: axis.snapshot() for name, axis in self._axes.items()},
        }

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value:.4f}" for name, value in self.values.items())
        return f"CompositeController({values}, moving={self.is_moving})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve(self, mapping: Mapping[str, Any]) -> list[tuple[AxisController, Any]]:
        """Pair each value with its axis, rejecting the whole mapping on unknown names."""
        unknown = [name for name in mapping if name not in self._axes]
        if unknown:
            raise InvalidAxisError(unknown, self._axes)
        return [(self._axes[name], value) for name, value in mapping.items()]
