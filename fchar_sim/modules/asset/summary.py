"""Action-level frame metadata (startup, recovery, loop count)."""

from dataclasses import dataclass
from typing import List

from fchar_sim.shared import constants as C

from .models import Action, ValueKind


@dataclass(frozen=True, slots=True)
class ActionSummary:
    action_id: int
    frame_count: int
    first_active_frame: int = 0   # 0-based, NOT_APPLICABLE when the action never hits
    recovery_frame: int = 0       # 0-based, NOT_APPLICABLE when absent
    end_frame: int = 0            # first actionable frame, 0-based
    loop_count: int = 0           # NOT_APPLICABLE loops forever

    def describe(self) -> List[str]:
        """Display lines; frame numbers are shown 1-based."""
        def frame(label: str, value: int) -> str:
            return f"{label}: N/A" if value == C.NOT_APPLICABLE else f"{label}: {value + 1}"

        loops = "infinite" if self.loop_count == C.NOT_APPLICABLE else str(self.loop_count)
        return [
            frame("First active frame", self.first_active_frame),
            frame("Recovery frame", self.recovery_frame),
            f"First actionable frame: {self.end_frame + 1}",
            f"Loop count: {loops}",
        ]


def summarize(action: Action) -> ActionSummary:
    frame_record = action.record(C.ACTION_FRAME_RECORD)
    state_record = action.record(C.ACTION_STATE_RECORD)

    def read(record, index: int) -> int:
        return 0 if record is None else record.read(index, ValueKind.INT32)

    return ActionSummary(
        action_id=action.action_id,
        frame_count=action.frame_count,
        first_active_frame=read(frame_record, C.ACTION_FIRST_ACTIVE_FRAME),
        recovery_frame=read(frame_record, C.ACTION_RECOVERY_FRAME),
        end_frame=read(frame_record, C.ACTION_END_FRAME),
        loop_count=read(state_record, C.ACTION_LOOP_COUNT),
    )
