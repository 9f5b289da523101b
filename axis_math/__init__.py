"""
axis_math
---------
Bound arithmetic shared by the axis controllers.
"""

from axis_math.axis_math import Bounds, clamp

__all__ = ["Bounds", "clamp"]
