"""Tests de identidad, etiquetas y forma canónica."""

import pytest

from deriva.core.resources import (
    Resource,
    canonical_text,
    describe,
    effective_namespace,
    fq_name,
    resource_name_for,
    sort_key,
)
from tests.helpers import make_obj


@pytest.mark.parametrize("kind,expected", [
    ("Pod", "pods"),
    ("ConfigMap", "configmaps"),
    ("Ingress", "ingresses"),
    ("NetworkPolicy", "networkpolicies"),
    ("Gateway", "gateways"),
    ("Endpoints", "endpoints"),
    ("", ""),
])
def test_resource_name_for(kind, expected):
    assert resource_name_for(kind) == expected


def test_fq_name_and_describe():
    assert fq_name(Resource(make_obj("Pod", "x"))) == "default.x"
    assert fq_name(Resource(make_obj("Namespace", "prod", namespace=None))) == "prod"
    assert describe(Resource(make_obj("Secret", "s", namespace="ops"))) == "secrets ops.s"


def test_identity_tolerates_missing_metadata():
    r = Resource({"kind": "Pod"})
    assert r.identity() == ("Pod", "", "")
    assert r.metadata == {}


def test_effective_namespace():
    assert effective_namespace(Resource(make_obj("Pod", "x", namespace=None)), "team") == "team"
    assert effective_namespace(Resource(make_obj("Pod", "x", namespace="ops")), "team") == "ops"
    assert effective_namespace(Resource(make_obj("ClusterRole", "admin", namespace=None)), "team") is None


def test_canonical_text_is_sorted_and_indented():
    assert canonical_text({"b": 1, "a": [True, None]}) == '{\n  "a": [\n    true,\n    null\n  ],\n  "b": 1\n}'


def test_sort_key_breaks_ties_with_content():
    a = Resource(make_obj("Pod", "x", spec={"v": 1}))
    b = Resource(make_obj("Pod", "x", spec={"v": 2}))
    assert sorted([b, a], key=sort_key) == [a, b]
