"""Tests del enmascarado de campos (estrategia subset)."""

import copy
from datetime import date

import pytest

from deriva.core.diff.masker import is_empty_value, remove_fields, remove_map_fields
from deriva.core.errors import MaskingContractError


@pytest.mark.parametrize("value", [[], {}, "", 0, 0.0, False, None])
def test_empty_values(value):
    assert is_empty_value(value) is True


@pytest.mark.parametrize("value", [[1], {"a": 1}, "x", 1, 0.5, True])
def test_non_empty_values(value):
    assert is_empty_value(value) is False


def test_unknown_leaf_type_fails_loudly():
    with pytest.raises(MaskingContractError):
        is_empty_value(date(2020, 1, 1))


def test_declared_only_empty_key_is_kept():
    declared = {"spec": {"ports": [], "selector": {}, "name": "", "replicas": 0, "paused": False, "x": None}}
    live = {"spec": {}}
    assert remove_map_fields(declared, live) == declared


def test_declared_only_non_empty_key_is_dropped():
    declared = {"spec": {"replicas": 3, "image": "nginx"}}
    live = {"spec": {"image": "nginx"}}
    assert remove_map_fields(declared, live) == {"spec": {"image": "nginx"}}


def test_live_only_keys_are_dropped():
    declared = {"metadata": {"name": "x"}}
    live = {"metadata": {"name": "x", "uid": "123", "resourceVersion": "9"}, "status": {"phase": "Running"}}
    assert remove_map_fields(declared, live) == {"metadata": {"name": "x"}}


def test_list_overflow_is_retained_verbatim():
    declared = {"items": [{"name": "a"}]}
    live = {"items": [{"name": "a", "extra": 1}, {"name": "b", "extra": 2}, "tail"]}
    masked = remove_map_fields(declared, live)
    assert masked["items"][0] == {"name": "a"}
    assert masked["items"][1:] == live["items"][1:]


def test_shorter_live_list_is_not_padded():
    declared = {"args": ["a", "b", "c"]}
    live = {"args": ["a"]}
    assert remove_map_fields(declared, live) == {"args": ["a"]}


def test_scalars_and_type_mismatch_pass_live_through():
    assert remove_fields("declared", "live") == "live"
    assert remove_fields({"a": 1}, ["not", "a", "map"]) == ["not", "a", "map"]
    assert remove_fields([1, 2], {"a": 1}) == {"a": 1}


def test_masking_is_idempotent():
    declared = {"spec": {"containers": [{"name": "c", "ports": []}], "replicas": 2, "tags": []}}
    live = {
        "spec": {"containers": [{"name": "c", "image": "x"}, {"name": "sidecar"}], "replicas": 3},
        "status": {"ready": 1},
    }
    once = remove_map_fields(declared, live)
    assert remove_map_fields(declared, once) == once


def test_masking_does_not_mutate_inputs():
    declared = {"spec": {"tags": [], "nested": {"k": "v"}}}
    live = {"spec": {"nested": {"k": "v", "extra": True}}, "status": {}}
    declared_before = copy.deepcopy(declared)
    live_before = copy.deepcopy(live)
    remove_map_fields(declared, live)
    assert declared == declared_before
    assert live == live_before
