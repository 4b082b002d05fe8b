"""
#WHERE
    Used by timeline/scanner.py (collision keys of the active frame) and
    tests/test_collision.py.

#WHAT
    Box Extractor: turns box ids into CollisionBox rectangles through the
    record resolver, and builds Push / Damage / Attack collision keys from
    their timeline records.

#INPUT
    CharacterAsset, box id + table kind, or a collision-key RSZRecord.

#OUTPUT
    CollisionBox, PushCollisionKey, DamageCollisionKey, AttackCollisionKey.
"""

import logging
from typing import List, Optional

from fchar_sim.modules.asset import CharacterAsset, RSZRecord, ValueKind, resolve
from fchar_sim.shared import constants as C

from .models import AttackCollisionKey, CollisionBox, DamageCollisionKey, PushCollisionKey

log = logging.getLogger(__name__)


def extract_box(asset: CharacterAsset, identifier: int, kind: str) -> Optional[CollisionBox]:
    record = resolve(asset, kind, identifier, C.BOX_STRIDE)
    if record is None:
        return None
    return CollisionBox(
        x=float(record.read(C.BOX_X, ValueKind.INT16)),
        y=float(record.read(C.BOX_Y, ValueKind.INT16)),
        width=float(record.read(C.BOX_WIDTH, ValueKind.INT16)),
        height=float(record.read(C.BOX_HEIGHT, ValueKind.INT16)),
    )


def extract_boxes(asset: CharacterAsset, identifiers: List[int], kind: str) -> List[CollisionBox]:
    """Boxes for *identifiers* in order; ids without a record are dropped."""
    boxes = []
    for identifier in identifiers:
        box = extract_box(asset, identifier, kind)
        if box is not None:
            boxes.append(box)
    return boxes


def build_push_key(asset: CharacterAsset, record: RSZRecord) -> PushCollisionKey:
    key = PushCollisionKey(
        condition=record.read(C.PUSH_CONDITION, ValueKind.UINT8),
        attribute=record.read(C.PUSH_ATTRIBUTE, ValueKind.UINT16),
    )
    box_id = record.get(C.PUSH_BOX_ID)
    if box_id is not None and box_id.kind is ValueKind.INT32:
        key.pushbox = extract_box(asset, box_id.value, C.THROW_HURT_BOX) or CollisionBox()
    return key


def build_damage_key(asset: CharacterAsset, record: RSZRecord) -> DamageCollisionKey:
    boxes = []
    for list_field in (C.DAMAGE_HEAD_LIST, C.DAMAGE_BODY_LIST, C.DAMAGE_LEG_LIST):
        ids = record.read_list(list_field, ValueKind.INT32)
        boxes.extend(extract_boxes(asset, ids, C.HURT_BOX))

    return DamageCollisionKey(
        condition=record.read(C.DAMAGE_CONDITION, ValueKind.UINT8),
        collision_type=record.read(C.DAMAGE_COLLISION_TYPE, ValueKind.UINT8),
        immune=record.read(C.DAMAGE_IMMUNE, ValueKind.UINT8),
        extend=record.read(C.DAMAGE_EXTEND, ValueKind.UINT8),
        level=record.read(C.DAMAGE_LEVEL, ValueKind.UINT8),
        type_flag=record.read(C.DAMAGE_TYPE_FLAG, ValueKind.UINT32),
        boxes=boxes,
        throw_box_ids=record.read_list(C.DAMAGE_THROW_LIST, ValueKind.INT32),
    )


def build_attack_key(asset: CharacterAsset, record: RSZRecord) -> AttackCollisionKey:
    key = AttackCollisionKey(
        condition=record.read(C.ATTACK_CONDITION, ValueKind.UINT8),
        collision_type=record.read(C.ATTACK_COLLISION_TYPE, ValueKind.UINT8),
        hit_id=record.read(C.ATTACK_HIT_ID, ValueKind.INT8),
        guard_bit=record.read(C.ATTACK_GUARD_BIT, ValueKind.UINT8),
        kind_flag=record.read(C.ATTACK_KIND_FLAG, ValueKind.UINT32),
        hit_offset=tuple(record.read(C.ATTACK_HIT_OFFSET, ValueKind.INT2)),
    )
    kind = C.PROXIMITY_BOX if key.is_proximity else C.STRIKE_BOX
    key.boxes = extract_boxes(asset, record.read_list(C.ATTACK_BOX_LIST, ValueKind.INT32), kind)
    return key
