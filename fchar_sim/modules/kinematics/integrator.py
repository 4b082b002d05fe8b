"""
#WHERE
    Called by controller.FrameController on every recompute, and by
    tests/test_kinematics.py.

#WHAT
    Kinematics Integrator: replays SteerKey (velocity / acceleration
    overrides) and PlaceKey (absolute root-motion samples) records frame by
    frame from frame 0.  Per frame: integrate, apply active keys, snapshot
    the previous-frame values, clamp to the ground.

#INPUT
    Action, number of frames to replay.

#OUTPUT
    KinematicState at the start of frame *up_to_frame*.
"""

import logging
from typing import Optional

import numpy as np

from fchar_sim.modules.asset import Action, RSZRecord, ValueKind
from fchar_sim.modules.timeline.scanner import scan
from fchar_sim.shared import constants as C

from .models import (
    KinematicState, RESERVED_OPERATIONS, SET_NEGATIVE_AXIS, SteerOperation, SteerValueType,
)

log = logging.getLogger(__name__)

_Y = 1


def steer_value(op: SteerOperation, value: np.float32, prev_value: np.float32,
                modify_value: np.float32) -> np.float32:
    if op is SteerOperation.SET:
        return modify_value
    if op is SteerOperation.ADD:
        return value + modify_value
    if op is SteerOperation.MULTIPLY:
        return value * modify_value
    if op in SET_NEGATIVE_AXIS:
        if (value < 0 and prev_value > 0) or (value > 0 and prev_value < 0):
            return modify_value
        return value
    if op is SteerOperation.SET_MINIMUM:
        return min(value, modify_value)
    if op is SteerOperation.SET_MAXIMUM:
        return max(value, modify_value)
    # NOP and RESERVED_OPERATIONS
    return value


def _operation(code: int) -> SteerOperation:
    try:
        return SteerOperation(code)
    except ValueError:
        log.debug("Unknown steer operation %d treated as NOP", code)
        return SteerOperation.NOP


def _value_type(code: int) -> Optional[SteerValueType]:
    try:
        return SteerValueType(code)
    except ValueError:
        log.debug("Unknown steer target %d ignored", code)
        return None


def apply_steer_key(state: KinematicState, record: RSZRecord) -> None:
    op = _operation(record.read(C.STEER_OPERATION, ValueKind.UINT8))
    target = _value_type(record.read(C.STEER_VALUE_TYPE, ValueKind.UINT8))
    if target is None:
        return
    modify_value = np.float32(record.read(C.STEER_MODIFY_VALUE, ValueKind.FLOAT))

    if target.is_velocity:
        vector, prev = state.velocity, state.prev_velocity
    else:
        vector, prev = state.acceleration, state.prev_acceleration
    axis = target.axis
    vector[axis] = steer_value(op, vector[axis], prev[axis], modify_value)

    negative_axis = SET_NEGATIVE_AXIS.get(op)
    if negative_axis is not None and state.velocity[negative_axis] == 0:
        state.acceleration[negative_axis] = 0


def apply_place_key(state: KinematicState, record: RSZRecord, frame: int) -> None:
    axis = record.read(C.PLACE_AXIS, ValueKind.UINT8)
    samples = record.read(C.PLACE_SAMPLES, ValueKind.LIST)
    if axis > 2 or frame >= len(samples):
        return
    sample = samples[frame]
    if sample.kind is ValueKind.FLOAT:
        state.root_motion[axis] = sample.value


def step(state: KinematicState, action: Action, frame: int) -> KinematicState:
    """Advance *state* through timeline frame *frame* in place."""
    state.velocity += state.acceleration
    state.position += state.velocity

    for record in scan(action, frame):
        if record.name == C.STEER_KEY:
            apply_steer_key(state, record)
        elif record.name == C.PLACE_KEY:
            apply_place_key(state, record, frame)

    state.prev_acceleration[:] = state.acceleration
    state.prev_velocity[:] = state.velocity
    state.prev_position[:] = state.position

    if state.position[_Y] < 0:
        state.position[_Y] = 0
        state.velocity[_Y] = 0
        state.acceleration[_Y] = 0
    return state


def integrate(action: Action, up_to_frame: int) -> KinematicState:
    """Replay frames ``0 .. up_to_frame - 1`` from rest."""
    state = KinematicState()
    for frame in range(max(up_to_frame, 0)):
        step(state, action, frame)
    log.debug("Action %d integrated over %d frames: pos=%s vel=%s",
              action.action_id, max(up_to_frame, 0), state.position, state.velocity)
    return state
