"""World-space placement of collision boxes relative to the character (Y up)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import CollisionBox

if TYPE_CHECKING:
    from fchar_sim.modules.kinematics.models import KinematicState


@dataclass(frozen=True, slots=True)
class BoxBounds:
    left: float
    bottom: float
    right: float
    top: float

    @property
    def center(self) -> tuple[float, float]:
        return ((self.left + self.right) / 2, (self.bottom + self.top) / 2)


def place_box(box: CollisionBox, state: KinematicState, anchored: bool = True) -> BoxBounds:
    """Bounds of *box* in world space.

    Anchored boxes follow the replayed position plus root motion; the root
    motion Y track runs opposite to the position Y axis.  Unanchored boxes
    (proximity volumes) stay at their authored offset.
    """
    cx, cy = box.x, box.y
    if anchored:
        cx += float(state.position[0] + state.root_motion[0])
        cy += float(state.position[1] - state.root_motion[1])
    return BoxBounds(
        left=cx - box.width,
        bottom=cy - box.height,
        right=cx + box.width,
        top=cy + box.height,
    )
