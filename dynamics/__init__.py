"""
dynamics
--------
Frame-driven kinematic controllers for scalar view parameters.

Re-exports the main classes so callers can write::

    from dynamics import AxisController, CompositeController, FrameLoop
"""

from dynamics.axis_controller import AxisController, AxisMode
from dynamics.composite_controller import CompositeController, InvalidAxisError
from dynamics.frame_loop import FrameLoop
from dynamics.profile import MotionProfile, record_profile

__all__ = [
    "AxisController",
    "AxisMode",
    "CompositeController",
    "InvalidAxisError",
    "FrameLoop",
    "MotionProfile",
    "record_profile",
]
