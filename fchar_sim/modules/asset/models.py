"""
#WHERE
    Used by resolver.py, loader.py, the collision / triggers / kinematics /
    timeline modules, controller.py and every test module.

#WHAT
    In-memory model of a parsed character asset: the tagged-union field
    value, generic records, the table-of-tables and the action timelines.
    Positional reads degrade to the kind's zero value instead of raising;
    the format tolerates sparse records.

#INPUT
    Values produced by the external parser (or loader.py).

#OUTPUT
    RSZValue, RSZRecord, DataList, KeyInterval, TimelineObject, Action,
    CharacterAsset dataclass instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ValueKind(Enum):
    BOOL   = "Bool"
    INT8   = "Int8"
    UINT8  = "UInt8"
    INT16  = "Int16"
    UINT16 = "UInt16"
    INT32  = "Int32"
    UINT32 = "UInt32"
    INT64  = "Int64"
    UINT64 = "UInt64"
    FLOAT  = "Float"
    DOUBLE = "Double"
    STRING = "String"
    INT2   = "Int2"
    VEC3   = "Vec3"
    LIST   = "List"


_ZERO: dict[ValueKind, Any] = {
    ValueKind.BOOL:   False,
    ValueKind.FLOAT:  0.0,
    ValueKind.DOUBLE: 0.0,
    ValueKind.STRING: "",
    ValueKind.INT2:   (0, 0),
    ValueKind.VEC3:   (0.0, 0.0, 0.0),
}


def zero_of(kind: ValueKind) -> Any:
    """Zero value of *kind* (0 for every integer kind)."""
    if kind is ValueKind.LIST:
        return []
    return _ZERO.get(kind, 0)


@dataclass(frozen=True, slots=True)
class RSZValue:
    kind: ValueKind
    value: Any

    @classmethod
    def int8(cls, v: int) -> "RSZValue":
        return cls(ValueKind.INT8, v)

    @classmethod
    def uint8(cls, v: int) -> "RSZValue":
        return cls(ValueKind.UINT8, v)

    @classmethod
    def int16(cls, v: int) -> "RSZValue":
        return cls(ValueKind.INT16, v)

    @classmethod
    def uint16(cls, v: int) -> "RSZValue":
        return cls(ValueKind.UINT16, v)

    @classmethod
    def int32(cls, v: int) -> "RSZValue":
        return cls(ValueKind.INT32, v)

    @classmethod
    def uint32(cls, v: int) -> "RSZValue":
        return cls(ValueKind.UINT32, v)

    @classmethod
    def uint64(cls, v: int) -> "RSZValue":
        return cls(ValueKind.UINT64, v)

    @classmethod
    def float32(cls, v: float) -> "RSZValue":
        return cls(ValueKind.FLOAT, v)

    @classmethod
    def int2(cls, x: int, y: int) -> "RSZValue":
        return cls(ValueKind.INT2, (x, y))

    @classmethod
    def list_of(cls, values: list["RSZValue"]) -> "RSZValue":
        return cls(ValueKind.LIST, list(values))


@dataclass(slots=True)
class RSZRecord:
    """One generic record: a kind tag plus positional fields."""
    name: str
    fields: list[RSZValue] = field(default_factory=list)

    def get(self, index: int) -> Optional[RSZValue]:
        if 0 <= index < len(self.fields):
            return self.fields[index]
        return None

    def read(self, index: int, kind: ValueKind) -> Any:
        """Field *index* if it holds a *kind* value, else the zero of *kind*."""
        value = self.get(index)
        if value is None or value.kind is not kind:
            return zero_of(kind)
        return value.value

    def read_list(self, index: int, kind: ValueKind) -> list:
        """Payloads of the *kind* entries of a List field; other entries skipped."""
        return [v.value for v in self.read(index, ValueKind.LIST) if v.kind is kind]


@dataclass(slots=True)
class DataList:
    data_ids: list[int] = field(default_factory=list)
    data_rsz: list[RSZRecord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class KeyInterval:
    start: int   # inclusive
    end: int     # exclusive

    def covers(self, frame: int) -> bool:
        return self.start <= frame < self.end


@dataclass(slots=True)
class TimelineObject:
    keys: list[KeyInterval] = field(default_factory=list)
    data: list[RSZRecord] = field(default_factory=list)
    object_table: list[int] = field(default_factory=list)  # 1-based into data

    def record_at(self, key_index: int) -> Optional[RSZRecord]:
        if self.object_table:
            if key_index >= len(self.object_table):
                return None
            position = self.object_table[key_index] - 1
        else:
            position = key_index
        if 0 <= position < len(self.data):
            return self.data[position]
        return None


@dataclass(slots=True)
class Action:
    action_id: int
    frame_count: int
    objects: list[TimelineObject] = field(default_factory=list)
    data: list[RSZRecord] = field(default_factory=list)  # [ActionFrame, ActionState]

    def record(self, index: int) -> Optional[RSZRecord]:
        return self.data[index] if 0 <= index < len(self.data) else None


@dataclass(slots=True)
class CharacterAsset:
    data_id_table: list[str] = field(default_factory=list)
    data_list_table: list[DataList] = field(default_factory=list)
    action_list: list[Action] = field(default_factory=list)

    def table(self, kind: str) -> Optional[DataList]:
        """First data list registered under *kind*, or None."""
        for n, data_id in enumerate(self.data_id_table):
            if data_id == kind:
                return self.data_list_table[n] if n < len(self.data_list_table) else None
        return None
