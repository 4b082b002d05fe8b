"""
#WHERE
    Imported by every fchar_sim module and by tests.

#WHAT
    Shared asset-layout constants (kind tags, strides, field positions).

#INPUT
    None (constant registries).

#OUTPUT
    Re-exported constants from constants.py.
"""

from . import constants
from .constants import (
    BOX_STRIDE,
    CONDITION_FLAG_LABELS,
    NOT_APPLICABLE,
    TRIGGER_GROUP_STRIDE,
    TRIGGER_STRIDE,
)

__all__ = [
    "constants",
    "BOX_STRIDE",
    "CONDITION_FLAG_LABELS",
    "NOT_APPLICABLE",
    "TRIGGER_GROUP_STRIDE",
    "TRIGGER_STRIDE",
]
