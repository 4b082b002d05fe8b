"""Shared fixtures: in-memory asset builders laid out like real .fchar tables."""

import json

import pytest

from fchar_sim.modules.asset import (
    Action, CharacterAsset, DataList, KeyInterval, RSZRecord, RSZValue, TimelineObject, ValueKind,
)
from fchar_sim.shared import constants as C


class AssetFactory:
    """Builds records and strided tables; every record sits at ``(n + 1) * stride - 1``."""

    @staticmethod
    def strided_table(entries: dict, stride: int, build) -> DataList:
        data = []
        for payload in entries.values():
            data.extend(RSZRecord("CharacterAsset.Padding") for _ in range(stride - 1))
            data.append(build(payload))
        return DataList(data_ids=list(entries), data_rsz=data)

    # ── table records ────────────────────────────────────────────────

    @staticmethod
    def box_record(x, y, width, height) -> RSZRecord:
        return RSZRecord("CharacterAsset.BoxData", [
            RSZValue.int16(x), RSZValue.int16(y), RSZValue.int16(width), RSZValue.int16(height),
        ])

    @classmethod
    def box_table(cls, boxes: dict) -> DataList:
        return cls.strided_table(boxes, C.BOX_STRIDE, lambda b: cls.box_record(*b))

    @staticmethod
    def trigger_record(action: int) -> RSZRecord:
        return RSZRecord("CharacterAsset.TriggerData",
                         [RSZValue.int32(0)] * C.TRIGGER_ACTION + [RSZValue.int32(action)])

    @classmethod
    def trigger_table(cls, actions: dict) -> DataList:
        return cls.strided_table(actions, C.TRIGGER_STRIDE, cls.trigger_record)

    @staticmethod
    def group_record(masks) -> RSZRecord:
        return RSZRecord("CharacterAsset.TriggerGroupData", [
            RSZValue.int32(0),
            RSZValue.list_of([RSZValue.uint64(m) for m in masks]),
        ])

    @classmethod
    def group_table(cls, groups: dict) -> DataList:
        return cls.strided_table(groups, C.TRIGGER_GROUP_STRIDE, cls.group_record)

    # ── timeline records ─────────────────────────────────────────────

    @staticmethod
    def steer(op: int, target: int, modify: float) -> RSZRecord:
        return RSZRecord(C.STEER_KEY, [
            RSZValue.uint8(op), RSZValue.uint8(target),
            RSZValue.int32(0), RSZValue.int32(0), RSZValue.float32(modify),
        ])

    @staticmethod
    def place(axis: int, samples) -> RSZRecord:
        return RSZRecord(C.PLACE_KEY, [
            RSZValue.int32(0), RSZValue.uint8(axis), RSZValue.int32(0),
            RSZValue.list_of([RSZValue.float32(s) for s in samples]),
        ])

    @staticmethod
    def push_key(box_id: int, condition: int = 1, attribute: int = 2) -> RSZRecord:
        return RSZRecord(C.PUSH_COLLISION_KEY, [
            RSZValue.uint8(condition), RSZValue.uint16(attribute), RSZValue.int32(box_id),
        ])

    @staticmethod
    def damage_key(head=(), body=(), leg=(), throw=(), collision_type=0, immune=0,
                   level=0, type_flag=0) -> RSZRecord:
        ids = lambda xs: RSZValue.list_of([RSZValue.int32(i) for i in xs])
        return RSZRecord(C.DAMAGE_COLLISION_KEY, [
            RSZValue.uint8(1), RSZValue.uint8(collision_type), RSZValue.uint8(immune),
            RSZValue.uint8(0), RSZValue.uint8(level), RSZValue.uint32(type_flag),
            RSZValue.int32(0), RSZValue.int32(0), RSZValue.int32(0),
            ids(head), ids(body), ids(leg), ids(throw),
        ])

    @staticmethod
    def attack_key(box_ids=(), collision_type=0, hit_id=0, guard_bit=0, kind_flag=0) -> RSZRecord:
        return RSZRecord(C.ATTACK_COLLISION_KEY, [
            RSZValue.uint8(1), RSZValue.uint8(collision_type), RSZValue.int8(hit_id),
            RSZValue.uint8(guard_bit), RSZValue.uint32(kind_flag),
        ] + [RSZValue.int32(0)] * 6 + [
            RSZValue.list_of([RSZValue.int32(i) for i in box_ids]),
        ])

    @staticmethod
    def trigger_key(group: int, condition_flag: int) -> RSZRecord:
        return RSZRecord(C.TRIGGER_KEY, [RSZValue.int32(group), RSZValue.uint32(condition_flag)])

    # ── containers ───────────────────────────────────────────────────

    @staticmethod
    def timeline(*keys) -> TimelineObject:
        """``timeline((start, end, record), ...)`` with a 1-based object table."""
        return TimelineObject(
            keys=[KeyInterval(start, end) for start, end, _ in keys],
            data=[record for _, _, record in keys],
            object_table=list(range(1, len(keys) + 1)),
        )

    @staticmethod
    def action(*objects, action_id=100, frame_count=10, info=(2, 5, 8, 1)) -> Action:
        first_active, recovery, end, loops = info
        return Action(
            action_id=action_id,
            frame_count=frame_count,
            objects=list(objects),
            data=[
                RSZRecord("CharacterAsset.ActionFrame", [
                    RSZValue.int32(first_active), RSZValue.int32(recovery), RSZValue.int32(end),
                ]),
                RSZRecord("CharacterAsset.ActionState", [RSZValue.int32(loops)]),
            ],
        )

    @staticmethod
    def asset(tables: dict, actions=()) -> CharacterAsset:
        return CharacterAsset(
            data_id_table=list(tables),
            data_list_table=list(tables.values()),
            action_list=list(actions),
        )

    # ── JSON interchange ─────────────────────────────────────────────

    @classmethod
    def value_tree(cls, value: RSZValue) -> dict:
        if value.kind is ValueKind.LIST:
            return {"type": value.kind.value, "value": [cls.value_tree(v) for v in value.value]}
        payload = list(value.value) if isinstance(value.value, tuple) else value.value
        return {"type": value.kind.value, "value": payload}

    @classmethod
    def record_tree(cls, record: RSZRecord) -> dict:
        return {"name": record.name, "fields": [cls.value_tree(v) for v in record.fields]}

    @classmethod
    def tree(cls, asset: CharacterAsset) -> dict:
        """Inverse of ``asset_from_dict``: the JSON layout the parser exports."""
        return {
            "data_id_table": list(asset.data_id_table),
            "data_list_table": [
                {"data_ids": list(t.data_ids), "data_rsz": [cls.record_tree(r) for r in t.data_rsz]}
                for t in asset.data_list_table
            ],
            "action_list": [
                {
                    "action_id": a.action_id,
                    "frames": a.frame_count,
                    "objects": [
                        {
                            "keys": [[k.start, k.end] for k in o.keys],
                            "object_table": list(o.object_table),
                            "data": [cls.record_tree(r) for r in o.data],
                        }
                        for o in a.objects
                    ],
                    "data": [cls.record_tree(r) for r in a.data],
                }
                for a in asset.action_list
            ],
        }


@pytest.fixture
def make():
    return AssetFactory


@pytest.fixture
def box_tables(make):
    return {
        C.HURT_BOX:       make.box_table({10: (1, 2, 3, 4), 20: (5, 6, 7, 8), 30: (9, 10, 11, 12)}),
        C.STRIKE_BOX:     make.box_table({1: (40, 50, 10, 5)}),
        C.PROXIMITY_BOX:  make.box_table({1: (0, 60, 100, 60)}),
        C.THROW_HURT_BOX: make.box_table({7: (0, 80, 25, 80)}),
    }


@pytest.fixture
def trigger_tables(make):
    return {
        # trigger ids 0, 1, 3 and 64 (bit 0 of the second mask)
        C.TRIGGER: make.trigger_table({0: 600, 1: 601, 3: 603, 64: 700}),
        C.TRIGGER_GROUP: make.group_table({5: [0b1011, 0b1], 6: [0b10]}),
    }


@pytest.fixture
def sample_asset(make, box_tables, trigger_tables):
    """Jab-like action: push box throughout, hurtboxes, an active window, a cancel window."""
    jab = make.action(
        make.timeline((0, 10, make.push_key(7))),
        make.timeline((0, 4, make.damage_key(head=[10], body=[20])),
                      (4, 10, make.damage_key(leg=[30]))),
        make.timeline((3, 6, make.attack_key([1], hit_id=2, kind_flag=0x10))),
        make.timeline((3, 8, make.trigger_key(5, 0x1 | 0x2))),
        make.timeline((0, 1, make.steer(1, 0, 2.0))),
        action_id=200, frame_count=10,
    )
    walk = make.action(make.timeline((0, 20, make.steer(1, 0, 1.5))), action_id=17, frame_count=20,
                       info=(-1, -1, 0, -1))
    return make.asset({**box_tables, **trigger_tables}, [jab, walk])


@pytest.fixture
def asset_file(make, sample_asset, tmp_path):
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(make.tree(sample_asset)), encoding="utf-8")
    return path
