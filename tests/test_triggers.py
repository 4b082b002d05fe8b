"""Tests for cancel-list expansion and condition-flag labels."""

import pytest

from fchar_sim.modules.asset import RSZRecord, RSZValue
from fchar_sim.modules.triggers import (
    Trigger, TriggerRequest, condition_labels, expand, format_condition_flags,
    group_masks, resolve_triggers, set_bits,
)
from fchar_sim.shared import constants as C


@pytest.fixture
def asset(make, trigger_tables):
    return make.asset(trigger_tables)


class TestSetBits:

    def test_least_significant_first(self):
        assert list(set_bits(0b1011)) == [0, 1, 3]

    def test_top_bit(self):
        assert list(set_bits(1 << 63)) == [63]

    def test_empty(self):
        assert list(set_bits(0)) == []


class TestExpand:

    def test_group_at_first_position(self, asset):
        assert group_masks(asset, 5) == [0b1011, 0b1]

    def test_mask_then_bit_order(self, asset):
        actions = [t.action for t in expand(asset, 5, 0x1)]
        assert actions == [600, 601, 603, 700]

    def test_flag_copied_to_every_trigger(self, asset):
        assert {t.condition_flag for t in expand(asset, 5, 0x6)} == {0x6}

    def test_unknown_group(self, asset):
        assert expand(asset, 99, 0x1) == []

    def test_unresolved_trigger_ids_skipped(self, make):
        asset = make.asset({
            C.TRIGGER: make.trigger_table({2: 900}),
            C.TRIGGER_GROUP: make.group_table({1: [0b111]}),
        })
        assert expand(asset, 1, 0x1) == [Trigger(900, 0x1)]

    def test_non_u64_masks_ignored(self, make):
        group = RSZRecord("CharacterAsset.TriggerGroupData", [
            RSZValue.int32(0), RSZValue.list_of([RSZValue.int32(0b1), RSZValue.uint64(0b10)]),
        ])
        asset = make.asset({
            C.TRIGGER: make.trigger_table({1: 800, 65: 801}),
            C.TRIGGER_GROUP: make.strided_table({4: None}, 1, lambda _: group),
        })
        assert [t.action for t in expand(asset, 4, 0x1)] == [800]


class TestResolveTriggers:

    def test_sorted_and_deduplicated(self, asset):
        triggers = resolve_triggers(asset, [TriggerRequest(5, 0x1), TriggerRequest(6, 0x1)])
        assert triggers == [Trigger(600, 0x1), Trigger(601, 0x1), Trigger(603, 0x1), Trigger(700, 0x1)]

    def test_same_action_different_flags_kept(self, asset):
        triggers = resolve_triggers(asset, [TriggerRequest(6, 0x2), TriggerRequest(6, 0x1)])
        assert triggers == [Trigger(601, 0x1), Trigger(601, 0x2)]

    def test_request_order_does_not_matter(self, asset):
        requests = [TriggerRequest(5, 0x4), TriggerRequest(6, 0x1), TriggerRequest(5, 0x1)]
        assert resolve_triggers(asset, requests) == resolve_triggers(asset, list(reversed(requests)))

    def test_no_requests(self, asset):
        assert resolve_triggers(asset, []) == []


class TestConditionFlags:

    def test_hit_guard(self):
        assert format_condition_flags(0x3) == "Hit | Guard"

    def test_display_order_not_bit_order(self):
        assert condition_labels(0x400 | 0x8 | 0x1000) == ["Counter", "Parry", "Armor"]

    def test_high_flags(self):
        assert condition_labels(0x100000 | 0x200000 | 0x400000) == ["BJump", "Throw", "Terminator"]

    def test_unlabelled_bits_hidden(self):
        assert format_condition_flags(0x1 | 0x80000000) == "Hit"
        assert format_condition_flags(0) == ""
