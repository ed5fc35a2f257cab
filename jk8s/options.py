"""Controller options: image pull policy and extra resource watches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PullPolicy(str, Enum):
    """When the container runtime pulls an application image."""

    ALWAYS = "Always"
    NEVER = "Never"
    IF_NOT_PRESENT = "IfNotPresent"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GVKWatch:
    """A group/version/kind whose objects the workspace controller watches."""

    group: str
    version: str
    kind: str

    def __str__(self) -> str:
        return f"{self.group}/{self.version}/{self.kind}"


@dataclass(kw_only=True)
class WorkspaceControllerOptions:
    """Settings handed to the workspace controller."""

    application_images_pull_policy: PullPolicy = PullPolicy.IF_NOT_PRESENT
    application_images_registry: str = ""
    watch_traefik: bool = False
    resource_watches: list[GVKWatch] = field(default_factory=list)


def parse_gvk_watches(gvk_list: str) -> list[GVKWatch]:
    """Parse ``group/version/kind,group/version/kind,...`` into watches.

    An empty string yields no watches. Any item that does not split into
    exactly three parts raises ValueError.
    """
    if not gvk_list:
        return []
    watches = []
    for item in gvk_list.split(","):
        parts = item.split("/")
        if len(parts) != 3:
            raise ValueError(
                f"invalid GVK format: {item}. Expected format: group/version/kind"
            )
        group, version, kind = parts
        watches.append(GVKWatch(group=group, version=version, kind=kind))
    return watches


_POLICIES = {
    "always": PullPolicy.ALWAYS,
    "never": PullPolicy.NEVER,
    "ifnotpresent": PullPolicy.IF_NOT_PRESENT,
}


def get_image_pull_policy(policy: str) -> PullPolicy:
    """Map a case-insensitive policy name to a PullPolicy, defaulting to IfNotPresent."""
    return _POLICIES.get(policy.lower(), PullPolicy.IF_NOT_PRESENT)