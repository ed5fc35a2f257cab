"""WorkspaceTemplate resource: reusable, bounded workspace configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from jk8s.meta import GROUP_VERSION, ObjectMeta, _check_type_meta

DEFAULT_STORAGE_SIZE = "10Gi"
MAX_DISPLAY_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_IMAGE_LENGTH = 500
MAX_ALLOWED_IMAGES = 50


@dataclass(kw_only=True)
class ResourceRange:
    """Minimum and maximum for one resource, as resource quantities."""

    min: str
    max: str

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceRange:
        return cls(min=str(data.get("min") or "0"), max=str(data.get("max") or "0"))


@dataclass(kw_only=True)
class ResourceBounds:
    """Bounds on CPU, memory and GPU overrides."""

    cpu: ResourceRange | None = None
    memory: ResourceRange | None = None
    gpu: ResourceRange | None = None

    def to_dict(self) -> dict[str, Any]:
        ranges = {"cpu": self.cpu, "memory": self.memory, "gpu": self.gpu}
        return {key: value.to_dict() for key, value in ranges.items() if value is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceBounds:
        def parse(key: str) -> ResourceRange | None:
            value = data.get(key)
            return ResourceRange.from_dict(value) if value is not None else None

        return cls(cpu=parse("cpu"), memory=parse("memory"), gpu=parse("gpu"))


@dataclass(kw_only=True)
class StorageConfig:
    """Default size and optional bounds for primary storage."""

    default_size: str = DEFAULT_STORAGE_SIZE
    min_size: str | None = None
    max_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.default_size:
            result["defaultSize"] = self.default_size
        if self.min_size is not None:
            result["minSize"] = self.min_size
        if self.max_size is not None:
            result["maxSize"] = self.max_size
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StorageConfig:
        min_size = data.get("minSize")
        max_size = data.get("maxSize")
        return cls(
            default_size=str(data.get("defaultSize") or DEFAULT_STORAGE_SIZE),
            min_size=str(min_size) if min_size is not None else None,
            max_size=str(max_size) if max_size is not None else None,
        )


def _check_length(field_name: str, value: str, minimum: int, maximum: int) -> None:
    if len(value) < minimum:
        raise ValueError(f"spec.{field_name} must be at least {minimum} characters long")
    if len(value) > maximum:
        raise ValueError(f"spec.{field_name} must be at most {maximum} characters long")


@dataclass(kw_only=True)
class WorkspaceTemplateSpec:
    """Desired state of a workspace template."""

    display_name: str
    default_image: str
    description: str = ""
    allowed_images: list[str] = field(default_factory=list)
    default_resources: dict[str, Any] | None = None
    resource_bounds: ResourceBounds | None = None
    primary_storage: StorageConfig | None = None
    environment_variables: list[dict[str, Any]] = field(default_factory=list)
    allow_secondary_storages: bool = True
    default_node_selector: dict[str, str] = field(default_factory=dict)
    default_affinity: dict[str, Any] | None = None
    default_tolerations: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("displayName", self.display_name, 1, MAX_DISPLAY_NAME_LENGTH)
        _check_length("description", self.description, 0, MAX_DESCRIPTION_LENGTH)
        _check_length("defaultImage", self.default_image, 1, MAX_IMAGE_LENGTH)
        if len(self.allowed_images) > MAX_ALLOWED_IMAGES:
            raise ValueError(f"spec.allowedImages must have at most {MAX_ALLOWED_IMAGES} items")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"displayName": self.display_name}
        if self.description:
            result["description"] = self.description
        result["defaultImage"] = self.default_image
        if self.allowed_images:
            result["allowedImages"] = list(self.allowed_images)
        if self.default_resources is not None:
            result["defaultResources"] = copy.deepcopy(self.default_resources)
        if self.resource_bounds is not None:
            result["resourceBounds"] = self.resource_bounds.to_dict()
        if self.primary_storage is not None:
            result["primaryStorage"] = self.primary_storage.to_dict()
        if self.environment_variables:
            result["environmentVariables"] = copy.deepcopy(self.environment_variables)
        result["allowSecondaryStorages"] = self.allow_secondary_storages
        if self.default_node_selector:
            result["defaultNodeSelector"] = dict(self.default_node_selector)
        if self.default_affinity is not None:
            result["defaultAffinity"] = copy.deepcopy(self.default_affinity)
        if self.default_tolerations:
            result["defaultTolerations"] = copy.deepcopy(self.default_tolerations)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceTemplateSpec:
        bounds = data.get("resourceBounds")
        storage = data.get("primaryStorage")
        allow_secondary = data.get("allowSecondaryStorages")
        resources = data.get("defaultResources")
        affinity = data.get("defaultAffinity")
        return cls(
            display_name=data.get("displayName") or "",
            description=data.get("description") or "",
            default_image=data.get("defaultImage") or "",
            allowed_images=list(data.get("allowedImages") or []),
            default_resources=copy.deepcopy(resources) if resources is not None else None,
            resource_bounds=ResourceBounds.from_dict(bounds) if bounds is not None else None,
            primary_storage=StorageConfig.from_dict(storage) if storage is not None else None,
            environment_variables=copy.deepcopy(list(data.get("environmentVariables") or [])),
            allow_secondary_storages=True if allow_secondary is None else bool(allow_secondary),
            default_node_selector=dict(data.get("defaultNodeSelector") or {}),
            default_affinity=copy.deepcopy(affinity) if affinity is not None else None,
            default_tolerations=copy.deepcopy(list(data.get("defaultTolerations") or [])),
        )


@dataclass(kw_only=True)
class WorkspaceTemplate:
    """A cluster-scoped workspace template object."""

    KIND: ClassVar[str] = "WorkspaceTemplate"

    spec: WorkspaceTemplateSpec
    metadata: ObjectMeta = field(default_factory=ObjectMeta)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = GROUP_VERSION.with_kind(self.KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            result["metadata"] = metadata
        result["spec"] = self.spec.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceTemplate:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=WorkspaceTemplateSpec.from_dict(data.get("spec") or {}),
        )


@dataclass(kw_only=True)
class WorkspaceTemplateList:
    """A list of workspace templates."""

    KIND: ClassVar[str] = "WorkspaceTemplateList"

    metadata: dict[str, Any] = field(default_factory=dict)
    items: list[WorkspaceTemplate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = GROUP_VERSION.with_kind(self.KIND)
        if self.metadata:
            result["metadata"] = copy.deepcopy(self.metadata)
        result["items"] = [item.to_dict() for item in self.items]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceTemplateList:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=copy.deepcopy(dict(data.get("metadata") or {})),
            items=[WorkspaceTemplate.from_dict(item) for item in data.get("items") or []],
        )