"""
axis_math.py
------------
Bound arithmetic for scalar axes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp *value* into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


@dataclass(frozen=True)
class Bounds:
    """Closed interval an axis value is confined to.

    Either end may be infinite.  ``Bounds()`` is the whole real line.
    """
    minimum: float = -math.inf
    maximum: float = math.inf

    def __post_init__(self) -> None:
        if math.isnan(self.minimum) or math.isnan(self.maximum):
            raise ValueError("Bounds must not be NaN.")
        if self.minimum > self.maximum:
            raise ValueError(
                f"Invalid bounds: minimum {self.minimum} > maximum {self.maximum}"
            )

    def clamp(self, value: float) -> float:
        return clamp(value, self.minimum, self.maximum)

    def to_dict(self) -> dict[str, Optional[float]]:
        """JSON-friendly form; infinite ends become ``None``."""
        return {
            "min": self.minimum if math.isfinite(self.minimum) else None,
            "max": self.maximum if math.isfinite(self.maximum) else None,
        }

    @classmethod
    def coerce(cls, value: Union[Bounds, tuple, list, dict, None]) -> Bounds:
        """Build Bounds from ``None``, a ``(min, max)`` pair or a ``{"min", "max"}`` dict.

        Missing or ``None`` ends are unbounded.
        """
        if value is None:
            return cls()
        if isinstance(value, Bounds):
            return value
        if isinstance(value, dict):
            lo, hi = value.get("min"), value.get("max")
        else:
            if len(value) != 2:
                raise ValueError(f"Bounds must be a (min, max) pair, got {value!r}")
            lo, hi = value
        return cls(
            minimum=-math.inf if lo is None else float(lo),
            maximum=math.inf if hi is None else float(hi),
        )
