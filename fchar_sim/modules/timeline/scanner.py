"""
#WHERE
    Used by kinematics/integrator.py (steer/place keys per simulated frame),
    controller.py (collision + trigger keys of the displayed frame) and
    tests/test_scanner.py.

#WHAT
    Active-Object Scanner: finds every timeline record whose half-open key
    interval covers a frame and dispatches it by kind tag.  Collision keys
    are built immediately, trigger keys become pending requests; steer and
    place keys are left to the integrator.

#INPUT
    Action (+ CharacterAsset for dispatch), 0-based timeline frame.

#OUTPUT
    List[RSZRecord] (scan) or FrameObjects (collect).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from fchar_sim.modules.asset import Action, CharacterAsset, RSZRecord, ValueKind
from fchar_sim.modules.collision import (
    AttackCollisionKey, DamageCollisionKey, PushCollisionKey,
    build_attack_key, build_damage_key, build_push_key,
)
from fchar_sim.modules.triggers import TriggerRequest
from fchar_sim.shared import constants as C

log = logging.getLogger(__name__)


@dataclass
class FrameObjects:
    push: List[PushCollisionKey] = field(default_factory=list)
    damage: List[DamageCollisionKey] = field(default_factory=list)
    attack: List[AttackCollisionKey] = field(default_factory=list)
    trigger_requests: List[TriggerRequest] = field(default_factory=list)


def scan(action: Action, frame: int) -> List[RSZRecord]:
    """Records active at *frame*, in object order then key order."""
    active = []
    for obj in action.objects:
        for key_index, key in enumerate(obj.keys):
            if not key.covers(frame):
                continue
            record = obj.record_at(key_index)
            if record is not None:
                active.append(record)
    return active


def _push(asset: CharacterAsset, record: RSZRecord, out: FrameObjects) -> None:
    out.push.append(build_push_key(asset, record))


def _damage(asset: CharacterAsset, record: RSZRecord, out: FrameObjects) -> None:
    out.damage.append(build_damage_key(asset, record))


def _attack(asset: CharacterAsset, record: RSZRecord, out: FrameObjects) -> None:
    out.attack.append(build_attack_key(asset, record))


def _trigger(asset: CharacterAsset, record: RSZRecord, out: FrameObjects) -> None:
    out.trigger_requests.append(TriggerRequest(
        group=record.read(C.TRIGGER_KEY_GROUP, ValueKind.INT32),
        condition_flag=record.read(C.TRIGGER_KEY_CONDITION_FLAG, ValueKind.UINT32),
    ))


_HANDLERS: Dict[str, Callable[[CharacterAsset, RSZRecord, FrameObjects], None]] = {
    C.PUSH_COLLISION_KEY:   _push,
    C.DAMAGE_COLLISION_KEY: _damage,
    C.ATTACK_COLLISION_KEY: _attack,
    C.TRIGGER_KEY:          _trigger,
}


def collect(asset: CharacterAsset, action: Action, frame: int) -> FrameObjects:
    out = FrameObjects()
    for record in scan(action, frame):
        handler = _HANDLERS.get(record.name)
        if handler is not None:
            handler(asset, record, out)
    log.debug("Frame %d: %d push, %d damage, %d attack, %d trigger keys",
              frame, len(out.push), len(out.damage), len(out.attack), len(out.trigger_requests))
    return out
