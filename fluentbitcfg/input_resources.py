"""Cluster-level input resources and their rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from .meta import ObjectMeta
from .plugins.base import Plugin, SecretLoader
from .plugins.custom import CustomPlugin
from .plugins.inputs import (
    Dummy,
    FluentbitMetrics,
    NodeExporterMetrics,
    PrometheusScrapeMetrics,
    Systemd,
)
from .plugins.tail import Tail


@dataclass(kw_only=True)
class InputSpec:
    """The desired state of a cluster input."""

    alias: str = ""
    log_level: str = ""
    dummy: Dummy | None = None
    tail: Tail | None = None
    systemd: Systemd | None = None
    node_exporter_metrics: NodeExporterMetrics | None = None
    prometheus_scrape_metrics: PrometheusScrapeMetrics | None = None
    fluent_bit_metrics: FluentbitMetrics | None = None
    custom_plugin: CustomPlugin | None = None

    def plugins(self) -> list[Plugin]:
        """The configured input plugins, in declaration order."""
        candidates = (
            self.dummy,
            self.tail,
            self.systemd,
            self.node_exporter_metrics,
            self.prometheus_scrape_metrics,
            self.fluent_bit_metrics,
            self.custom_plugin,
        )
        return [p for p in candidates if p is not None]


@dataclass(kw_only=True)
class ClusterInput:
    """A cluster-wide input definition."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: InputSpec = field(default_factory=InputSpec)


@dataclass(kw_only=True)
class ClusterInputList:
    """A list of cluster inputs."""

    items: list[ClusterInput] = field(default_factory=list)

    def load(self, sl: SecretLoader) -> str:
        """Render every input plugin as an ``[Input]`` section, ordered by name."""
        out: list[str] = []
        self.items.sort(key=lambda item: item.metadata.name)
        for item in self.items:
            spec = item.spec
            for plugin in spec.plugins():
                out.append("[Input]\n")
                if plugin.name():
                    out.append(f"    Name    {plugin.name()}\n")
                if spec.alias:
                    out.append(f"    Alias    {spec.alias}\n")
                if spec.log_level:
                    out.append(f"    Log_Level    {spec.log_level}\n")
                out.append(str(plugin.params(sl)))
        return "".join(out)