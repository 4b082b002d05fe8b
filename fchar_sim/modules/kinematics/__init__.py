"""
#WHERE
    Imported by controller.py, main.py and tests.

#WHAT
    Kinematics module: deterministic replay of SteerKey / PlaceKey records
    into position, velocity, acceleration and root motion.

#INPUT
    Action, frame count.

#OUTPUT
    KinematicState.
"""

from .models import (
    KinematicState, RESERVED_OPERATIONS, SET_NEGATIVE_AXIS, SteerOperation, SteerValueType,
)
from .integrator import apply_place_key, apply_steer_key, integrate, step, steer_value

__all__ = [
    'KinematicState', 'RESERVED_OPERATIONS', 'SET_NEGATIVE_AXIS',
    'SteerOperation', 'SteerValueType',
    'apply_place_key', 'apply_steer_key', 'integrate', 'step', 'steer_value',
]
