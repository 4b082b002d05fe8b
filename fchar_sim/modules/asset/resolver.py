"""Indirect record lookup over the asset's table-of-tables."""

import logging
from typing import Optional

from .models import CharacterAsset, RSZRecord

log = logging.getLogger(__name__)

_U32_MASK = 0xFFFFFFFF


def find_index(asset: CharacterAsset, kind: str, identifier: int) -> int:
    """1-based position of *identifier* in the *kind* table's data_ids; 0 if absent.

    Ids are compared as unsigned 32-bit values, the way the format stores them.
    """
    table = asset.table(kind)
    if table is None:
        return 0
    wanted = identifier & _U32_MASK
    for n, data_id in enumerate(table.data_ids):
        if data_id & _U32_MASK == wanted:
            return n + 1
    return 0


def resolve(asset: CharacterAsset, kind: str, identifier: int, stride: int) -> Optional[RSZRecord]:
    """Record for *identifier* in the *kind* table, read at ``index * stride - 1``.

    Returns None on any miss (unknown kind, unknown id, position past the
    record array); lookups never raise.
    """
    index = find_index(asset, kind, identifier)
    if index == 0:
        log.debug("No %s record for id %d", kind, identifier)
        return None

    records = asset.table(kind).data_rsz
    position = index * stride - 1
    if position >= len(records):
        log.debug("%s id %d points past the record array (%d >= %d)",
                  kind, identifier, position, len(records))
        return None
    return records[position]
