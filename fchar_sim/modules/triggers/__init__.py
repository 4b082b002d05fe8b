"""
#WHERE
    Imported by timeline/scanner.py, controller.py, main.py and tests.

#WHAT
    Triggers module: cancel-list resolution from TriggerKey records and
    condition-flag labels.

#INPUT
    CharacterAsset, TriggerRequest list.

#OUTPUT
    Sorted, deduplicated List[Trigger]; flag label strings.
"""

from .models import Trigger, TriggerRequest
from .flags import condition_labels, format_condition_flags
from .resolver import expand, group_masks, resolve_triggers, set_bits

__all__ = [
    'Trigger', 'TriggerRequest',
    'condition_labels', 'format_condition_flags',
    'expand', 'group_masks', 'resolve_triggers', 'set_bits',
]
