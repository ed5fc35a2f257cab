"""Group-version identity, object metadata and status conditions."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class GroupVersion:
    """An API group and version, such as ``workspaces.jupyter.org/v1alpha1``."""

    group: str
    version: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version

    @property
    def api_version(self) -> str:
        """The value used in an object's ``apiVersion`` field."""
        return str(self)

    def with_kind(self, kind: str) -> dict[str, str]:
        """Return the ``apiVersion``/``kind`` pair for ``kind`` in this group-version."""
        return {"apiVersion": self.api_version, "kind": kind}


GROUP_VERSION = GroupVersion(group="workspaces.jupyter.org", version="v1alpha1")


def _omit_empty(items: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is None or an empty/zero value."""
    return {key: value for key, value in items.items() if value not in (None, "", 0, [], {})}


def _check_type_meta(data: Mapping[str, Any], kind: str) -> None:
    """Raise ValueError if ``data`` names a different apiVersion or kind."""
    api_version = data.get("apiVersion")
    if api_version and api_version != GROUP_VERSION.api_version:
        raise ValueError(
            f"unexpected apiVersion {api_version!r} for {kind}, "
            f"expected {GROUP_VERSION.api_version!r}"
        )
    found = data.get("kind")
    if found and found != kind:
        raise ValueError(f"unexpected kind {found!r}, expected {kind!r}")


@dataclass(kw_only=True)
class ObjectMeta:
    """Standard metadata carried by every stored object."""

    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    creation_timestamp: str | None = None
    deletion_timestamp: str | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    owner_references: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "name": self.name,
                "generateName": self.generate_name,
                "namespace": self.namespace,
                "uid": self.uid,
                "resourceVersion": self.resource_version,
                "generation": self.generation,
                "creationTimestamp": self.creation_timestamp,
                "deletionTimestamp": self.deletion_timestamp,
                "labels": dict(self.labels),
                "annotations": dict(self.annotations),
                "finalizers": list(self.finalizers),
                "ownerReferences": copy.deepcopy(self.owner_references),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ObjectMeta:
        data = data or {}
        return cls(
            name=data.get("name") or "",
            generate_name=data.get("generateName") or "",
            namespace=data.get("namespace") or "",
            uid=data.get("uid") or "",
            resource_version=data.get("resourceVersion") or "",
            generation=int(data.get("generation") or 0),
            creation_timestamp=data.get("creationTimestamp"),
            deletion_timestamp=data.get("deletionTimestamp"),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
            finalizers=list(data.get("finalizers") or []),
            owner_references=copy.deepcopy(list(data.get("ownerReferences") or [])),
        )


@dataclass(kw_only=True)
class Condition:
    """One aspect of a resource's observed state."""

    type: str = ""
    status: str = ""
    reason: str = ""
    message: str = ""
    last_transition_time: str = ""
    observed_generation: int = 0

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type, "status": self.status}
        if self.observed_generation:
            result["observedGeneration"] = self.observed_generation
        result["lastTransitionTime"] = self.last_transition_time
        result["reason"] = self.reason
        result["message"] = self.message
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        return cls(
            type=data.get("type") or "",
            status=data.get("status") or "",
            reason=data.get("reason") or "",
            message=data.get("message") or "",
            last_transition_time=data.get("lastTransitionTime") or "",
            observed_generation=int(data.get("observedGeneration") or 0),
        )