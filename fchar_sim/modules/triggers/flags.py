"""Human-readable labels for TriggerKey condition flags."""

from typing import List

from fchar_sim.shared.constants import CONDITION_FLAG_LABELS, FLAG_SEPARATOR


def condition_labels(condition_flag: int) -> List[str]:
    return [label for bit, label in CONDITION_FLAG_LABELS if condition_flag & bit]


def format_condition_flags(condition_flag: int) -> str:
    """e.g. ``0x3`` → ``"Hit | Guard"``; unlabelled bits are not shown."""
    return FLAG_SEPARATOR.join(condition_labels(condition_flag))
