"""WorkspaceAccessStrategy resource: how workspaces are exposed to users."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from jk8s.meta import GROUP_VERSION, Condition, ObjectMeta, _check_type_meta


@dataclass(kw_only=True)
class AccessResourceTemplate:
    """Template for a resource created for each workspace."""

    kind: str
    api_version: str
    name_prefix: str
    template: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "apiVersion": self.api_version,
            "namePrefix": self.name_prefix,
            "template": self.template,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessResourceTemplate:
        return cls(
            kind=data.get("kind") or "",
            api_version=data.get("apiVersion") or "",
            name_prefix=data.get("namePrefix") or "",
            template=data.get("template") or "",
        )


@dataclass(kw_only=True)
class AccessEnvTemplate:
    """Template for an environment variable merged into the main container."""

    name: str
    value_template: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "valueTemplate": self.value_template}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessEnvTemplate:
        return cls(name=data.get("name") or "", value_template=data.get("valueTemplate") or "")


@dataclass(kw_only=True)
class WorkspaceAccessStrategySpec:
    """Desired state of an access strategy."""

    display_name: str = ""
    access_resource_templates: list[AccessResourceTemplate] = field(default_factory=list)
    merge_env: list[AccessEnvTemplate] = field(default_factory=list)
    access_url_template: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "displayName": self.display_name,
            "accessResourceTemplates": [item.to_dict() for item in self.access_resource_templates],
        }
        if self.merge_env:
            result["mergeEnv"] = [item.to_dict() for item in self.merge_env]
        if self.access_url_template:
            result["accessURLTemplate"] = self.access_url_template
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceAccessStrategySpec:
        return cls(
            display_name=data.get("displayName") or "",
            access_resource_templates=[
                AccessResourceTemplate.from_dict(item)
                for item in data.get("accessResourceTemplates") or []
            ],
            merge_env=[AccessEnvTemplate.from_dict(item) for item in data.get("mergeEnv") or []],
            access_url_template=data.get("accessURLTemplate") or "",
        )


@dataclass(kw_only=True)
class WorkspaceAccessStrategyStatus:
    """Observed state of an access strategy."""

    conditions: list[Condition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        if not self.conditions:
            return {}
        return {"conditions": [condition.to_dict() for condition in self.conditions]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceAccessStrategyStatus:
        data = data or {}
        return cls(conditions=[Condition.from_dict(item) for item in data.get("conditions") or []])


@dataclass(kw_only=True)
class WorkspaceAccessStrategy:
    """An access strategy object."""

    KIND: ClassVar[str] = "WorkspaceAccessStrategy"

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkspaceAccessStrategySpec = field(default_factory=WorkspaceAccessStrategySpec)
    status: WorkspaceAccessStrategyStatus = field(default_factory=WorkspaceAccessStrategyStatus)

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
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceAccessStrategy:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=WorkspaceAccessStrategySpec.from_dict(data.get("spec") or {}),
            status=WorkspaceAccessStrategyStatus.from_dict(data.get("status")),
        )


@dataclass(kw_only=True)
class WorkspaceAccessStrategyList:
    """A list of access strategies."""

    KIND: ClassVar[str] = "WorkspaceAccessStrategyList"

    metadata: dict[str, Any] = field(default_factory=dict)
    items: list[WorkspaceAccessStrategy] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = GROUP_VERSION.with_kind(self.KIND)
        if self.metadata:
            result["metadata"] = copy.deepcopy(self.metadata)
        result["items"] = [item.to_dict() for item in self.items]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceAccessStrategyList:
        _check_type_meta(data, cls.KIND)
        return cls(
            metadata=copy.deepcopy(dict(data.get("metadata") or {})),
            items=[WorkspaceAccessStrategy.from_dict(item) for item in data.get("items") or []],
        )