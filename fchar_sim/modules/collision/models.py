"""Collision volumes and the three collision-key records built from them."""

from dataclasses import dataclass, field

from fchar_sim.shared.constants import PROXIMITY_COLLISION_TYPE


@dataclass(slots=True)
class CollisionBox:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0    # half-extent
    height: float = 0.0   # half-extent


@dataclass(slots=True)
class PushCollisionKey:
    condition: int = 0
    attribute: int = 0
    pushbox: CollisionBox = field(default_factory=CollisionBox)


@dataclass(slots=True)
class DamageCollisionKey:
    condition: int = 0
    collision_type: int = 0
    immune: int = 0
    extend: int = 0
    level: int = 0
    type_flag: int = 0
    boxes: list[CollisionBox] = field(default_factory=list)
    throw_box_ids: list[int] = field(default_factory=list)


@dataclass(slots=True)
class AttackCollisionKey:
    condition: int = 0
    collision_type: int = 0
    hit_id: int = 0
    guard_bit: int = 0
    kind_flag: int = 0
    hit_offset: tuple[int, int] = (0, 0)
    boxes: list[CollisionBox] = field(default_factory=list)

    @property
    def is_proximity(self) -> bool:
        return self.collision_type == PROXIMITY_COLLISION_TYPE
