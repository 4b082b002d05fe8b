"""
#WHERE
    Used by integrator.py, collision/placement.py, controller.py, main.py
    and tests/test_kinematics.py.

#WHAT
    Kinematic replay state and the SteerKey enumerations.  Vectors are
    float32 (x, y, z) with Y up, matching the asset's single precision.

#INPUT
    None (state starts at rest).

#OUTPUT
    KinematicState, SteerOperation, SteerValueType.
"""

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Dict, List

import numpy as np


class SteerOperation(IntEnum):
    NOP              = 0
    SET              = 1
    ADD              = 2
    MULTIPLY         = 3
    SET_SIGN         = 4
    ADD_SIGN         = 5
    SET_NEGATIVE_X   = 6
    SET_NEGATIVE_Y   = 7
    SET_NEGATIVE_Z   = 8
    SET_MINIMUM      = 9
    SET_MAXIMUM      = 10
    SET_IGNORE       = 11
    SET_INHERIT      = 12
    SET_TARGET       = 13
    SET_HOMING_VALUE = 14
    SET_HOMING_TIME  = 15
    SET_INHERIT_XYZ  = 16


# Operations the asset defines but whose runtime effect is unknown; they leave
# the value untouched.
RESERVED_OPERATIONS = frozenset({
    SteerOperation.SET_SIGN,
    SteerOperation.ADD_SIGN,
    SteerOperation.SET_IGNORE,
    SteerOperation.SET_INHERIT,
    SteerOperation.SET_TARGET,
    SteerOperation.SET_HOMING_VALUE,
    SteerOperation.SET_HOMING_TIME,
    SteerOperation.SET_INHERIT_XYZ,
})

# SetNegative{X,Y,Z} → axis index
SET_NEGATIVE_AXIS: Dict[SteerOperation, int] = {
    SteerOperation.SET_NEGATIVE_X: 0,
    SteerOperation.SET_NEGATIVE_Y: 1,
    SteerOperation.SET_NEGATIVE_Z: 2,
}


class SteerValueType(IntEnum):
    VELOCITY_X     = 0
    VELOCITY_Y     = 1
    VELOCITY_Z     = 2
    ACCELERATION_X = 3
    ACCELERATION_Y = 4
    ACCELERATION_Z = 5

    @property
    def is_velocity(self) -> bool:
        return self < SteerValueType.ACCELERATION_X

    @property
    def axis(self) -> int:
        return int(self) % 3


def _vec3() -> np.ndarray:
    return np.zeros(3, dtype=np.float32)


@dataclass
class KinematicState:
    position: np.ndarray          = field(default_factory=_vec3)
    velocity: np.ndarray          = field(default_factory=_vec3)
    acceleration: np.ndarray      = field(default_factory=_vec3)
    prev_position: np.ndarray     = field(default_factory=_vec3)
    prev_velocity: np.ndarray     = field(default_factory=_vec3)
    prev_acceleration: np.ndarray = field(default_factory=_vec3)
    root_motion: np.ndarray       = field(default_factory=_vec3)

    def copy(self) -> "KinematicState":
        return KinematicState(**{f.name: getattr(self, f.name).copy() for f in fields(self)})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KinematicState):
            return NotImplemented
        return all(np.array_equal(getattr(self, f.name), getattr(other, f.name)) for f in fields(self))

    def to_dict(self) -> Dict[str, List[float]]:
        return {f.name: [float(v) for v in getattr(self, f.name)] for f in fields(self)}
