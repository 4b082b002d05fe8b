"""
#WHERE
    Imported by timeline/scanner.py, controller.py, main.py and tests.

#WHAT
    Collision module: push / damage / attack keys, the box extractor and
    world-space box placement.

#INPUT
    CharacterAsset + collision-key records, KinematicState for placement.

#OUTPUT
    CollisionBox, *CollisionKey dataclasses, BoxBounds.
"""

from .models import AttackCollisionKey, CollisionBox, DamageCollisionKey, PushCollisionKey
from .extractor import (
    build_attack_key, build_damage_key, build_push_key, extract_box, extract_boxes,
)
from .placement import BoxBounds, place_box

__all__ = [
    'AttackCollisionKey', 'CollisionBox', 'DamageCollisionKey', 'PushCollisionKey',
    'build_attack_key', 'build_damage_key', 'build_push_key', 'extract_box', 'extract_boxes',
    'BoxBounds', 'place_box',
]
