"""Object metadata and API group information for the fluentbit resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class GroupVersion:
    """An API group paired with a version."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the ``group/version`` string used as ``apiVersion``."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="fluentbit.fluent.io", version="v1alpha2")


@dataclass(kw_only=True)
class ObjectMeta:
    """Metadata common to every resource."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    deletion_timestamp: datetime | None = None


@dataclass(kw_only=True)
class LabelSelector:
    """Selects resources by their labels."""

    match_labels: dict[str, str] = field(default_factory=dict)
    match_expressions: list[dict] = field(default_factory=list)