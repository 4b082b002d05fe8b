"""
#WHERE
    Entry point of the replay core, used by main.py and by any host UI
    (frame slider, action list, search-by-id box).

#WHAT
    Frame cache / recompute controller: owns the loaded asset, the selected
    action and frame, and the derived replay state.  Selection changes only
    mark the cache STALE; the next query rebuilds everything (kinematics
    from frame 0, collision keys, cancel list, summary) and marks it FRESH.

#INPUT
    CharacterAsset (or a JSON dump path), action index / id, 1-based frame.

#OUTPUT
    KinematicState, collision keys, sorted cancel list, ActionSummary,
    world-space box bounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from fchar_sim.modules.asset import (
    Action, ActionSummary, AssetLoadError, CharacterAsset, load_asset, summarize,
)
from fchar_sim.modules.collision import (
    AttackCollisionKey, BoxBounds, DamageCollisionKey, PushCollisionKey, place_box,
)
from fchar_sim.modules.kinematics import KinematicState, integrate
from fchar_sim.modules.timeline import collect
from fchar_sim.modules.triggers import Trigger, format_condition_flags, resolve_triggers
from fchar_sim.shared import constants as C

log = logging.getLogger(__name__)

ActionLabeler = Callable[[int], str]


@dataclass
class ReplayConfig:
    asset_path: Optional[str] = None
    action_index: Optional[int] = None
    action_id: Optional[int] = None     # takes precedence over action_index
    frame: int = 1                      # 1-based
    as_json: bool = False


class CacheState(Enum):
    STALE = auto()
    FRESH = auto()


class FrameController:
    """Replays one action of one asset. Recomputes lazily on the first query after a change."""

    def __init__(self, asset: CharacterAsset | None = None,
                 action_labeler: ActionLabeler | None = None) -> None:
        self.action_labeler: ActionLabeler = action_labeler or str
        self.recompute_count = 0
        self._asset: CharacterAsset | None = None
        self._action_index: int | None = None
        self._frame = 1
        self._reset_derived()
        if asset is not None:
            self.set_asset(asset)

    def _reset_derived(self) -> None:
        self.state = CacheState.STALE
        self._kinematics = KinematicState()
        self._push: List[PushCollisionKey] = []
        self._damage: List[DamageCollisionKey] = []
        self._attack: List[AttackCollisionKey] = []
        self._triggers: List[Trigger] = []
        self._summary: ActionSummary | None = None

    # ── Selection ────────────────────────────────────────────────────────

    def open_asset(self, path: Union[str, Path]) -> bool:
        """Load a JSON dump; on failure the controller is left with no asset."""
        self.set_asset(None)
        try:
            asset = load_asset(path)
        except AssetLoadError as exc:
            log.warning("Asset load failed: %s", exc)
            return False
        self.set_asset(asset)
        return True

    def set_asset(self, asset: CharacterAsset | None) -> None:
        self._asset = asset
        self._action_index = None
        self._frame = 1
        self._reset_derived()

    @property
    def asset(self) -> CharacterAsset | None:
        return self._asset

    @property
    def action_index(self) -> int | None:
        return self._action_index

    @property
    def action(self) -> Action | None:
        if self._asset is None or self._action_index is None:
            return None
        return self._asset.action_list[self._action_index]

    @property
    def frame(self) -> int:
        return self._frame

    def find_action_by_id(self, action_id: int) -> int | None:
        if self._asset is None:
            return None
        for index, action in enumerate(self._asset.action_list):
            if action.action_id == action_id:
                return index
        return None

    def select_action(self, index: int) -> None:
        if self._asset is None:
            raise RuntimeError("No asset loaded")
        if not 0 <= index < len(self._asset.action_list):
            raise IndexError(f"Action index {index} out of range "
                             f"(0..{len(self._asset.action_list) - 1})")
        self._action_index = index
        self._frame = 1
        self.state = CacheState.STALE
        log.info("Selected action #%d: %s", index, self.action_labeler(self.action.action_id))

    def select_action_by_id(self, action_id: int) -> bool:
        index = self.find_action_by_id(action_id)
        if index is None:
            log.info("No action with id %d", action_id)
            return False
        self.select_action(index)
        return True

    def set_frame(self, frame: int) -> None:
        """Scrub to a 1-based frame, clamped to ``1 .. frame_count``."""
        action = self.action
        last = max(action.frame_count, 1) if action is not None else 1
        clamped = min(max(frame, 1), last)
        if clamped != frame:
            log.debug("Frame %d clamped to %d", frame, clamped)
        if clamped != self._frame:
            self._frame = clamped
            self.state = CacheState.STALE

    # ── Recompute ────────────────────────────────────────────────────────

    def refresh(self) -> None:
        if self.state is CacheState.FRESH:
            return
        action = self.action
        self._reset_derived()
        if action is not None:
            timeline_frame = self._frame - 1
            self._kinematics = integrate(action, timeline_frame)
            objects = collect(self._asset, action, timeline_frame)
            self._push = objects.push
            self._damage = objects.damage
            self._attack = objects.attack
            self._triggers = resolve_triggers(self._asset, objects.trigger_requests)
            self._summary = summarize(action)
            self.recompute_count += 1
            log.debug("Recomputed action %d frame %d (%d cancels)",
                      action.action_id, self._frame, len(self._triggers))
        self.state = CacheState.FRESH

    # ── Queries ──────────────────────────────────────────────────────────

    def current_kinematic_state(self) -> KinematicState:
        self.refresh()
        return self._kinematics

    def active_push_boxes(self) -> List[PushCollisionKey]:
        self.refresh()
        return self._push

    def active_damage_boxes(self) -> List[DamageCollisionKey]:
        self.refresh()
        return self._damage

    def active_attack_boxes(self) -> List[AttackCollisionKey]:
        self.refresh()
        return self._attack

    def active_triggers(self) -> List[Trigger]:
        self.refresh()
        return self._triggers

    def action_summary(self) -> ActionSummary | None:
        self.refresh()
        return self._summary

    def describe_triggers(self) -> List[str]:
        return [
            f"Action {self.action_labeler(t.action)}  Cancel flags: {format_condition_flags(t.condition_flag)}"
            for t in self.active_triggers()
        ]

    def placed_boxes(self) -> List[Tuple[str, int, BoxBounds]]:
        """(category, collision_type, world bounds) for every active box.

        Push boxes have no collision type of their own and report
        ``PUSH_COLLISION_TYPE``.
        """
        state = self.current_kinematic_state()
        placed = [("push", C.PUSH_COLLISION_TYPE, place_box(k.pushbox, state)) for k in self._push]
        for key in self._damage:
            placed.extend(("damage", key.collision_type, place_box(b, state)) for b in key.boxes)
        for key in self._attack:
            placed.extend(
                ("attack", key.collision_type, place_box(b, state, anchored=not key.is_proximity))
                for b in key.boxes
            )
        return placed
