import pytest

from jk8s.meta import GROUP_VERSION, Condition, GroupVersion, ObjectMeta


def test_group_version_string():
    group_version = GroupVersion(group="workspaces.jupyter.org", version="v1alpha1")
    assert str(group_version) == "workspaces.jupyter.org/v1alpha1"
    assert group_version.api_version == "workspaces.jupyter.org/v1alpha1"
    assert str(GROUP_VERSION) == group_version.api_version


def test_with_kind():
    assert GROUP_VERSION.with_kind("Workspace") == {
        "apiVersion": "workspaces.jupyter.org/v1alpha1",
        "kind": "Workspace",
    }


def test_core_group_has_version_only():
    assert GroupVersion(group="", version="v1").api_version == "v1"


def test_group_version_is_hashable_and_comparable():
    other = GroupVersion(group="workspaces.jupyter.org", version="v1alpha1")
    assert other == GROUP_VERSION
    assert len({other, GROUP_VERSION}) == 1


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="immutable-test-workspace",
        namespace="default",
        labels={"workspaces.jupyter.org/template": "immutable-template-1"},
        finalizers=["workspaces.jupyter.org/template-protection"],
        generation=3,
    )
    data = meta.to_dict()
    assert data["labels"] == {"workspaces.jupyter.org/template": "immutable-template-1"}
    assert ObjectMeta.from_dict(data) == meta


def test_empty_object_meta_serializes_to_empty_dict():
    assert ObjectMeta().to_dict() == {}
    assert ObjectMeta.from_dict(None) == ObjectMeta()


def test_object_meta_does_not_alias_input():
    labels = {"new-label": "test"}
    meta = ObjectMeta.from_dict({"name": "metadata-mutable-template", "labels": labels})
    labels["new-label"] = "changed"
    assert meta.labels["new-label"] == "test"


def test_condition_round_trip():
    condition = Condition(
        type="Valid",
        status="False",
        reason="TemplateViolation",
        message="cpu exceeds bound",
        last_transition_time="2025-01-01T00:00:00Z",
        observed_generation=2,
    )
    assert Condition.from_dict(condition.to_dict()) == condition


def test_condition_omits_zero_observed_generation():
    data = Condition(type="Available", status="True").to_dict()
    assert "observedGeneration" not in data
    assert data["type"] == "Available"
    assert set(data) == {"type", "status", "lastTransitionTime", "reason", "message"}


@pytest.mark.parametrize("missing", ["type", "status"])
def test_condition_from_partial_dict_defaults_to_empty(missing):
    data = {"type": "Degraded", "status": "False"}
    del data[missing]
    condition = Condition.from_dict(data)
    assert getattr(condition, missing) == ""