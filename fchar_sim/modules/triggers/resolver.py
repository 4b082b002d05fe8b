"""
#WHERE
    Used by controller.py (cancel list of the current frame) and
    tests/test_triggers.py.

#WHAT
    Trigger/Cancel Resolver: expands a trigger group into its cancel
    targets.  Two levels of indirection: the group record holds 64-bit
    masks, each set bit names a global trigger id (bit + 64 * mask index)
    whose record carries the target action.

#INPUT
    CharacterAsset, TriggerRequest(s) collected by the timeline scanner.

#OUTPUT
    List[Trigger], sorted and deduplicated for exposure.
"""

import logging
from typing import Iterable, Iterator, List

from fchar_sim.modules.asset import CharacterAsset, ValueKind, resolve
from fchar_sim.shared import constants as C

from .models import Trigger, TriggerRequest

log = logging.getLogger(__name__)


def set_bits(mask: int, width: int = C.TRIGGER_MASK_BITS) -> Iterator[int]:
    """Positions of the set bits of *mask*, least significant first."""
    for bit_index in range(width):
        if (mask >> bit_index) & 1:
            yield bit_index


def group_masks(asset: CharacterAsset, group: int) -> List[int]:
    record = resolve(asset, C.TRIGGER_GROUP, group, C.TRIGGER_GROUP_STRIDE)
    if record is None:
        return []
    return record.read_list(C.TRIGGER_GROUP_MASKS, ValueKind.UINT64)


def expand(asset: CharacterAsset, group: int, condition_flag: int) -> List[Trigger]:
    """Triggers enabled by *group*, in mask order then bit order."""
    triggers = []
    for trigger_index, mask in enumerate(group_masks(asset, group)):
        for bit_index in set_bits(mask):
            trigger_id = bit_index + trigger_index * C.TRIGGER_MASK_BITS
            record = resolve(asset, C.TRIGGER, trigger_id, C.TRIGGER_STRIDE)
            if record is None:
                continue
            triggers.append(Trigger(
                action=record.read(C.TRIGGER_ACTION, ValueKind.INT32),
                condition_flag=condition_flag,
            ))
    return triggers


def resolve_triggers(asset: CharacterAsset, requests: Iterable[TriggerRequest]) -> List[Trigger]:
    found = set()
    for request in requests:
        found.update(expand(asset, request.group, request.condition_flag))
    triggers = sorted(found)
    log.debug("%d cancel options", len(triggers))
    return triggers
