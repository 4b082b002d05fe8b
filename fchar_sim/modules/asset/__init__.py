"""
#WHERE
    Imported by the collision, triggers, kinematics and timeline modules,
    controller.py, main.py and tests.

#WHAT
    Asset module: record-tree data model, indirect table resolver and the
    JSON loader for parser exports.

#INPUT
    JSON dump path (loader) or in-memory CharacterAsset.

#OUTPUT
    CharacterAsset, resolved RSZRecord lookups.
"""

from .models import (
    Action, CharacterAsset, DataList, KeyInterval, RSZRecord, RSZValue,
    TimelineObject, ValueKind, zero_of,
)
from .resolver import find_index, resolve
from .summary import ActionSummary, summarize
from .loader import AssetLoadError, asset_from_dict, load_asset

__all__ = [
    'Action', 'CharacterAsset', 'DataList', 'KeyInterval', 'RSZRecord',
    'RSZValue', 'TimelineObject', 'ValueKind', 'zero_of',
    'find_index', 'resolve',
    'ActionSummary', 'summarize',
    'AssetLoadError', 'asset_from_dict', 'load_asset',
]
