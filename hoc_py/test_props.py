"""Tests for props helpers."""

import pytest

from hoc_py.props import (
    changed_keys,
    check_props,
    freeze_props,
    merge_props,
    omit_props,
    same_value,
    shallow_equal,
)


class TestFreezeProps:

    def test_is_read_only(self):
        props = freeze_props({"a": 1})
        with pytest.raises(TypeError):
            props["b"] = 2

    def test_copies_input(self):
        source = {"a": 1}
        props = freeze_props(source, b=2)
        source["a"] = 99
        assert dict(props) == {"a": 1, "b": 2}

    def test_empty(self):
        assert dict(freeze_props()) == {}


class TestMergeProps:

    def test_drops_consumed_keys(self):
        merged = merge_props({"a": 1, "token": "x"}, consumed=["token"])
        assert dict(merged) == {"a": 1}

    def test_injected_wins_on_collision(self):
        merged = merge_props({"a": 1, "b": 2}, injected={"b": 3})
        assert dict(merged) == {"a": 1, "b": 3}

    def test_pass_through_values_unchanged(self):
        payload = object()
        merged = merge_props({"payload": payload}, injected={"x": 1})
        assert merged["payload"] is payload

    def test_does_not_touch_inputs(self):
        received = {"a": 1}
        injected = {"b": 2}
        merge_props(received, ["a"], injected)
        assert received == {"a": 1}
        assert injected == {"b": 2}

    def test_omit(self):
        assert dict(omit_props({"a": 1, "b": 2}, ["b", "c"])) == {"a": 1}


class TestComparisons:

    @pytest.mark.parametrize("a,b", [(1, 1), ("x", "x"), (None, None), (2.5, 2.5), (b"x", b"x")])
    def test_equal_primitives(self, a, b):
        assert same_value(a, b)

    def test_identity_for_objects(self):
        items = [1, 2]
        assert same_value(items, items)
        assert not same_value([1, 2], [1, 2])

    def test_primitives_of_different_types(self):
        assert not same_value(1, True)
        assert not same_value(1, 1.0)

    def test_changed_keys(self):
        prev = {"foo": 1, "bar": [1]}
        nxt = {"foo": 2, "bar": prev["bar"]}
        assert changed_keys(prev, nxt, ["foo", "bar"]) == ["foo"]

    def test_missing_key_is_not_a_change(self):
        assert changed_keys({"foo": 1}, {"bar": 1}, ["foo", "bar"]) == []
        assert changed_keys({}, {"foo": 1}, ["foo"]) == []

    def test_shallow_equal(self):
        shared = {"nested": True}
        assert shallow_equal({"a": 1, "b": shared}, {"a": 1, "b": shared})
        assert not shallow_equal({"a": 1}, {"a": 1, "b": 2})
        assert not shallow_equal({"b": {"nested": True}}, {"b": {"nested": True}})


class TestCheckProps:

    def test_type_mismatch(self, Base):
        problems = check_props(Base, {"id": "one"})
        assert len(problems) == 1
        assert "expected int" in problems[0]

    def test_missing_and_extra_keys_are_fine(self, Base):
        assert check_props(Base, {}) == []
        assert check_props(Base, {"id": 1, "extra": object()}) == []
