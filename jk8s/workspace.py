"""Workspace resource: desired state, observed state and lists."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from jk8s.meta import GROUP_VERSION, Condition, ObjectMeta, _check_type_meta, _omit_empty

DEFAULT_STORAGE_SIZE = "10Gi"
DEFAULT_MOUNT_PATH = "/home/jovyan"
DESIRED_STATUSES = ("Running", "Stopped")


def _copy_opt(value: Any) -> Any:
    return copy.deepcopy(value) if value is not None else None


@dataclass(kw_only=True)
class VolumeSpec:
    """An existing persistent volume claim mounted into the workspace pod."""

    name: str
    persistent_volume_claim_name: str
    mount_path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "persistentVolumeClaimName": self.persistent_volume_claim_name,
            "mountPath": self.mount_path,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VolumeSpec:
        return cls(
            name=data.get("name") or "",
            persistent_volume_claim_name=data.get("persistentVolumeClaimName") or "",
            mount_path=data.get("mountPath") or "",
        )


@dataclass(kw_only=True)
class ContainerConfig:
    """Command and arguments for the workspace container."""

    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"command": list(self.command), "args": list(self.args)})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContainerConfig:
        return cls(
            command=list(data.get("command") or []),
            args=list(data.get("args") or []),
        )


@dataclass(kw_only=True)
class StorageSpec:
    """Persistent storage for a workspace; sizes are resource quantities."""

    storage_class_name: str | None = None
    size: str = DEFAULT_STORAGE_SIZE
    mount_path: str = DEFAULT_MOUNT_PATH

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.storage_class_name is not None:
            result["storageClassName"] = self.storage_class_name
        if self.size:
            result["size"] = self.size
        if self.mount_path:
            result["mountPath"] = self.mount_path
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StorageSpec:
        return cls(
            storage_class_name=data.get("storageClassName"),
            size=str(data.get("size") or DEFAULT_STORAGE_SIZE),
            mount_path=data.get("mountPath") or DEFAULT_MOUNT_PATH,
        )


@dataclass(kw_only=True)
class AccessStrategyRef:
    """Reference to a WorkspaceAccessStrategy."""

    name: str
    namespace: str = ""

    def to_dict(self) -> dict[str, Any]:
        result = {"name": self.name}
        if self.namespace:
            result["namespace"] = self.namespace
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessStrategyRef:
        return cls(name=data.get("name") or "", namespace=data.get("namespace") or "")


@dataclass(kw_only=True)
class WorkspaceSpec:
    """Desired state of a workspace."""

    display_name: str = ""
    image: str = ""
    desired_status: str = ""
    resources: dict[str, Any] | None = None
    storage: StorageSpec | None = None
    volumes: list[VolumeSpec] = field(default_factory=list)
    container_config: ContainerConfig | None = None
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: dict[str, Any] | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    lifecycle: dict[str, Any] | None = None
    access_strategy: AccessStrategyRef | None = None
    template_ref: str | None = None

    def __post_init__(self) -> None:
        if self.desired_status and self.desired_status not in DESIRED_STATUSES:
            raise ValueError(
                f"spec.desiredStatus must be one of {', '.join(DESIRED_STATUSES)}, "
                f"got {self.desired_status!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"displayName": self.display_name}
        result.update(
            _omit_empty(
                {
                    "image": self.image,
                    "desiredStatus": self.desired_status,
                    "resources": _copy_opt(self.resources),
                    "storage": self.storage.to_dict() if self.storage else None,
                    "volumes": [volume.to_dict() for volume in self.volumes],
                    "containerConfig": (
                        self.container_config.to_dict() if self.container_config else None
                    ),
                    "nodeSelector": dict(self.node_selector),
                    "affinity": _copy_opt(self.affinity),
                    "tolerations": copy.deepcopy(self.tolerations),
                    "lifecycle": _copy_opt(self.lifecycle),
                    "accessStrategy": (
                        self.access_strategy.to_dict() if self.access_strategy else None
                    ),
                }
            )
        )
        # An empty container config or storage spec is still a set pointer.
        if self.storage is not None:
            result["storage"] = self.storage.to_dict()
        if self.container_config is not None:
            result["containerConfig"] = self.container_config.to_dict()
        if self.resources is not None:
            result["resources"] = copy.deepcopy(self.resources)
        if self.template_ref is not None:
            result["templateRef"] = self.template_ref
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceSpec:
        storage = data.get("storage")
        container_config = data.get("containerConfig")
        access_strategy = data.get("accessStrategy")
        return cls(
            display_name=data.get("displayName") or "",
            image=data.get("image") or "",
            desired_status=data.get("desiredStatus") or "",
            resources=_copy_opt(data.get("resources")),
            storage=StorageSpec.from_dict(storage) if storage is not None else None,
            volumes=[VolumeSpec.from_dict(item) for item in data.get("volumes") or []],
            container_config=(
                ContainerConfig.from_dict(container_config)
                if container_config is not None
                else None
            ),
            node_selector=dict(data.get("nodeSelector") or {}),
            affinity=_copy_opt(data.get("affinity")),
            tolerations=copy.deepcopy(list(data.get("tolerations") or [])),
            lifecycle=_copy_opt(data.get("lifecycle")),
            access_strategy=(
                AccessStrategyRef.from_dict(access_strategy)
                if access_strategy is not None
                else None
            ),
            template_ref=data.get("templateRef"),
        )


@dataclass(kw_only=True)
class AccessResourceStatus:
    """A resource created from an access strategy template."""

    kind: str
    api_version: str
    name: str
    namespace: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "apiVersion": self.api_version,
            "name": self.name,
            "namespace": self.namespace,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessResourceStatus:
        return cls(
            kind=data.get("kind") or "",
            api_version=data.get("apiVersion") or "",
            name=data.get("name") or "",
            namespace=data.get("namespace") or "",
        )


@dataclass(kw_only=True)
class WorkspaceStatus:
    """Observed state of a workspace."""

    deployment_name: str = ""
    service_name: str = ""
    access_url: str = ""
    access_resource_selector: str = ""
    access_resources: list[AccessResourceStatus] = field(default_factory=list)
    conditions: list[Condition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "deploymentName": self.deployment_name,
                "serviceName": self.service_name,
                "accessURL": self.access_url,
                "accessResourceSelector": self.access_resource_selector,
                "accessResources": [item.to_dict() for item in self.access_resources],
                "conditions": [condition.to_dict() for condition in self.conditions],
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceStatus:
        data = data or {}
        return cls(
            deployment_name=data.get("deploymentName") or "",
            service_name=data.get("serviceName") or "",
            access_url=data.get("accessURL") or "",
            access_resource_selector=data.get("accessResourceSelector") or "",
            access_resources=[
                AccessResourceStatus.from_dict(item) for item in data.get("accessResources") or []
            ],
            conditions=[Condition.from_dict(item) for item in data.get("conditions") or []],
        )


@dataclass(kw_only=True)
class Workspace:
    """A workspace object."""

    KIND: ClassVar[str] = "Workspace"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkspaceSpec = field(default_factory=WorkspaceSpec)
    status: WorkspaceStatus = field(default_factory=WorkspaceStatus)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = GROUP_VERSION.with_kind(self.KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            result["metadata"] = metadata
        result["spec"] = self.spec.to_dict()
        status = self.status.to_dict()
        if status:
            result["status"] = status
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Workspace:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=WorkspaceSpec.from_dict(data.get("spec") or {}),
            status=WorkspaceStatus.from_dict(data.get("status")),
        )


@dataclass(kw_only=True)
class WorkspaceList:
    """A list of workspaces."""

    KIND: ClassVar[str] = "WorkspaceList"

    metadata: dict[str, Any] = field(default_factory=dict)
    items: list[Workspace] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = GROUP_VERSION.with_kind(self.KIND)
        if self.metadata:
            result["metadata"] = copy.deepcopy(self.metadata)
        result["items"] = [item.to_dict() for item in self.items]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceList:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=copy.deepcopy(dict(data.get("metadata") or {})),
            items=[Workspace.from_dict(item) for item in data.get("items") or []],
        )