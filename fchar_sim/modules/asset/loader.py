"""
#WHERE
    Called by controller.FrameController.open_asset() and main.py.

#WHAT
    Loads the JSON export of a parsed .fchar record tree into the asset
    model.  Structural problems (missing tables, unknown value kinds,
    payloads that cannot be coerced to their kind, invalid JSON) raise
    AssetLoadError; missing payloads and sparse records read as zero.

#INPUT
    Path to a JSON dump, or an already-decoded dict.

#OUTPUT
    CharacterAsset.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .models import (
    Action, CharacterAsset, DataList, KeyInterval, RSZRecord, RSZValue,
    TimelineObject, ValueKind, zero_of,
)

log = logging.getLogger(__name__)

_KINDS: Dict[str, ValueKind] = {k.value: k for k in ValueKind}


class AssetLoadError(ValueError):
    """The asset dump could not be read or is not a record tree."""


_INTEGER_KINDS = frozenset({
    ValueKind.INT8, ValueKind.UINT8, ValueKind.INT16, ValueKind.UINT16,
    ValueKind.INT32, ValueKind.UINT32, ValueKind.INT64, ValueKind.UINT64,
})

# Tuple kinds → (item count, item type)
_TUPLE_KINDS: Dict[ValueKind, Tuple[int, type]] = {
    ValueKind.INT2: (2, int),
    ValueKind.VEC3: (3, float),
}


def _payload(kind: ValueKind, payload: Any) -> Any:
    """Coerce *payload* to the Python type of *kind*; a missing payload is the kind's zero."""
    if payload is None:
        return zero_of(kind)
    if kind is ValueKind.LIST:
        if not isinstance(payload, list):
            raise TypeError(f"expected a list, got {type(payload).__name__}")
        return [_value(item) for item in payload]
    if kind in _TUPLE_KINDS:
        size, cast = _TUPLE_KINDS[kind]
        if not isinstance(payload, (list, tuple)) or len(payload) != size:
            raise TypeError(f"expected {size} items, got {payload!r}")
        return tuple(cast(item) for item in payload)
    if kind in _INTEGER_KINDS:
        return int(payload)
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return float(payload)
    if kind is ValueKind.BOOL:
        return bool(payload)
    return str(payload)


def _value(raw: Dict[str, Any]) -> RSZValue:
    try:
        kind = _KINDS[raw["type"]]
    except (KeyError, TypeError):
        raise AssetLoadError(f"Unknown value: {raw!r}")

    try:
        return RSZValue(kind, _payload(kind, raw.get("value")))
    except AssetLoadError:
        raise
    except (TypeError, ValueError, OverflowError) as e:
        raise AssetLoadError(f"Bad {kind.value} payload {raw.get('value')!r}: {e}") from e


def _record(raw: Dict[str, Any]) -> RSZRecord:
    return RSZRecord(
        name=raw.get("name", ""),
        fields=[_value(f) for f in raw.get("fields", [])],
    )


def _timeline_object(raw: Dict[str, Any]) -> TimelineObject:
    return TimelineObject(
        keys=[KeyInterval(int(start), int(end)) for start, end in raw.get("keys", [])],
        data=[_record(r) for r in raw.get("data", [])],
        object_table=[int(i) for i in raw.get("object_table", [])],
    )


def _action(raw: Dict[str, Any]) -> Action:
    return Action(
        action_id=int(raw.get("action_id", 0)),
        frame_count=int(raw.get("frames", 0)),
        objects=[_timeline_object(o) for o in raw.get("objects", [])],
        data=[_record(r) for r in raw.get("data", [])],
    )


def asset_from_dict(tree: Dict[str, Any]) -> CharacterAsset:
    try:
        data_id_table: List[str] = list(tree["data_id_table"])
        data_list_table = [
            DataList(
                data_ids=[int(i) for i in entry.get("data_ids", [])],
                data_rsz=[_record(r) for r in entry.get("data_rsz", [])],
            )
            for entry in tree["data_list_table"]
        ]
        action_list = [_action(a) for a in tree.get("action_list", [])]
    except AssetLoadError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise AssetLoadError(f"Malformed asset tree: {e}") from e

    if len(data_id_table) != len(data_list_table):
        raise AssetLoadError(
            f"data_id_table has {len(data_id_table)} entries, "
            f"data_list_table has {len(data_list_table)}"
        )
    return CharacterAsset(data_id_table, data_list_table, action_list)


def load_asset(path: Union[str, Path]) -> CharacterAsset:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            tree = json.load(f)
    except OSError as e:
        raise AssetLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise AssetLoadError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(tree, dict):
        raise AssetLoadError(f"{path}: top level must be an object")

    asset = asset_from_dict(tree)
    log.info("Loaded asset %s: %d tables, %d actions",
             path.name, len(asset.data_id_table), len(asset.action_list))
    return asset
