import pytest

from jk8s.meta import ObjectMeta
from jk8s.template import (
    ResourceBounds,
    ResourceRange,
    StorageConfig,
    WorkspaceTemplate,
    WorkspaceTemplateList,
    WorkspaceTemplateSpec,
)


def _validation_template():
    return WorkspaceTemplate(
        metadata=ObjectMeta(name="validation-template"),
        spec=WorkspaceTemplateSpec(
            display_name="Validation Test Template",
            description="Template for validation testing",
            default_image="quay.io/jupyter/minimal-notebook:latest",
            allowed_images=[
                "quay.io/jupyter/minimal-notebook:latest",
                "quay.io/jupyter/scipy-notebook:latest",
                "custom/allowed-image:v1",
            ],
            default_resources={
                "requests": {"cpu": "500m", "memory": "1Gi"},
                "limits": {"cpu": "2", "memory": "4Gi"},
            },
            resource_bounds=ResourceBounds(
                cpu=ResourceRange(min="100m", max="4"),
                memory=ResourceRange(min="256Mi", max="8Gi"),
                gpu=ResourceRange(min="0", max="2"),
            ),
            primary_storage=StorageConfig(default_size="10Gi", min_size="1Gi", max_size="100Gi"),
            environment_variables=[
                {"name": "JUPYTER_ENABLE_LAB", "value": "yes"},
                {"name": "DEFAULT_ENV", "value": "test"},
            ],
            allow_secondary_storages=True,
        ),
    )


def test_template_round_trip():
    template = _validation_template()
    assert WorkspaceTemplate.from_dict(template.to_dict()) == template


def test_template_serialized_keys():
    data = _validation_template().to_dict()
    assert data["kind"] == "WorkspaceTemplate"
    assert data["spec"]["resourceBounds"]["gpu"] == {"min": "0", "max": "2"}
    assert data["spec"]["primaryStorage"] == {
        "defaultSize": "10Gi",
        "minSize": "1Gi",
        "maxSize": "100Gi",
    }
    assert len(data["spec"]["environmentVariables"]) == 2


def test_empty_default_image_rejected():
    with pytest.raises(ValueError, match="defaultImage"):
        WorkspaceTemplateSpec(display_name="Empty Image Template", default_image="")


def test_empty_display_name_rejected():
    with pytest.raises(ValueError, match="displayName"):
        WorkspaceTemplateSpec.from_dict({"defaultImage": "quay.io/jupyter/minimal-notebook:latest"})


def test_display_name_length_limit():
    WorkspaceTemplateSpec(display_name="a" * 100, default_image="img")
    with pytest.raises(ValueError, match="displayName"):
        WorkspaceTemplateSpec(display_name="a" * 101, default_image="img")


def test_description_length_limit():
    with pytest.raises(ValueError, match="description"):
        WorkspaceTemplateSpec(display_name="t", default_image="img", description="d" * 501)


def test_allowed_images_limit():
    images = [f"image-{n}:latest" for n in range(51)]
    with pytest.raises(ValueError, match="allowedImages"):
        WorkspaceTemplateSpec(display_name="t", default_image="img", allowed_images=images)


def test_allow_secondary_storages_defaults_true():
    spec = WorkspaceTemplateSpec.from_dict(
        {"displayName": "Minimal Template", "defaultImage": "quay.io/jupyter/minimal-notebook:latest"}
    )
    assert spec.allow_secondary_storages is True
    assert spec.default_resources is None


def test_allow_secondary_storages_false_preserved():
    spec = WorkspaceTemplateSpec(
        display_name="Restricted Template",
        default_image="quay.io/jupyter/minimal-notebook:latest",
        allow_secondary_storages=False,
    )
    assert WorkspaceTemplateSpec.from_dict(spec.to_dict()).allow_secondary_storages is False


def test_storage_config_default_size():
    storage = StorageConfig.from_dict({})
    assert storage.default_size == "10Gi"
    assert storage.min_size is None
    assert storage.to_dict() == {"defaultSize": "10Gi"}


def test_resource_bounds_omit_unset_ranges():
    bounds = ResourceBounds(cpu=ResourceRange(min="250m", max="2"))
    data = bounds.to_dict()
    assert set(data) == {"cpu"}
    assert ResourceBounds.from_dict(data) == bounds


def test_wrong_kind_rejected():
    with pytest.raises(ValueError, match="kind"):
        WorkspaceTemplate.from_dict(
            {"kind": "Workspace", "spec": {"displayName": "x", "defaultImage": "y"}}
        )


def test_template_list_round_trip():
    templates = WorkspaceTemplateList(items=[_validation_template()])
    data = templates.to_dict()
    assert data["kind"] == "WorkspaceTemplateList"
    assert WorkspaceTemplateList.from_dict(data) == templates