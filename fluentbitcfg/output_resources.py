"""Cluster-level and namespaced output resources and their rendering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .meta import ObjectMeta
from .plugins.base import Plugin, SecretLoader
from .plugins.custom import (
    CustomPlugin,
    generate_namespaced_match_expr,
    generate_namespaced_match_regexpr,
    make_custom_config_namespaced,
)


@dataclass(kw_only=True)
class OutputSpec:
    """The desired state of an output resource."""

    match: str = ""
    match_regex: str = ""
    alias: str = ""
    log_level: str = ""
    azure_blob: Plugin | None = None
    azure_log_analytics: Plugin | None = None
    cloud_watch: Plugin | None = None
    retry_limit: str = ""
    elasticsearch: Plugin | None = None
    file: Plugin | None = None
    forward: Plugin | None = None
    http: Plugin | None = None
    kafka: Plugin | None = None
    null: Plugin | None = None
    stdout: Plugin | None = None
    tcp: Plugin | None = None
    loki: Plugin | None = None
    syslog: Plugin | None = None
    influx_db: Plugin | None = None
    data_dog: Plugin | None = None
    firehose: Plugin | None = None
    kinesis: Plugin | None = None
    stackdriver: Plugin | None = None
    splunk: Plugin | None = None
    open_search: Plugin | None = None
    open_telemetry: Plugin | None = None
    prometheus_remote_write: Plugin | None = None
    s3: Plugin | None = None
    custom_plugin: CustomPlugin | None = None

    def plugins(self) -> list[Plugin]:
        """The configured output plugins, in declaration order."""
        candidates = (
            self.azure_blob,
            self.azure_log_analytics,
            self.cloud_watch,
            self.elasticsearch,
            self.file,
            self.forward,
            self.http,
            self.kafka,
            self.null,
            self.stdout,
            self.tcp,
            self.loki,
            self.syslog,
            self.influx_db,
            self.data_dog,
            self.firehose,
            self.kinesis,
            self.stackdriver,
            self.splunk,
            self.open_search,
            self.open_telemetry,
            self.prometheus_remote_write,
            self.s3,
            self.custom_plugin,
        )
        return [p for p in candidates if p is not None]


@dataclass(kw_only=True)
class ClusterOutput:
    """A cluster-wide output definition."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: OutputSpec = field(default_factory=OutputSpec)


@dataclass(kw_only=True)
class Output:
    """An output definition scoped to a namespace."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: OutputSpec = field(default_factory=OutputSpec)


@dataclass(kw_only=True)
class ClusterOutputList:
    """A list of cluster outputs."""

    items: list[ClusterOutput] = field(default_factory=list)

    def load(self, sl: SecretLoader) -> str:
        """Render every output plugin as an ``[Output]`` section, ordered by name."""
        out: list[str] = []
        for item in sorted(self.items, key=lambda i: i.metadata.name):
            spec = item.spec
            for plugin in spec.plugins():
                out.append("[Output]\n")
                if plugin.name():
                    out.append(f"    Name    {plugin.name()}\n")
                if spec.match:
                    out.append(f"    Match    {spec.match}\n")
                if spec.log_level:
                    out.append(f"    Log_Level    {spec.log_level}\n")
                if spec.match_regex:
                    out.append(f"    Match_Regex    {spec.match_regex}\n")
                if spec.alias:
                    out.append(f"    Alias    {spec.alias}\n")
                if spec.retry_limit:
                    out.append(f"    Retry_Limit    {spec.retry_limit}\n")
                out.append(str(plugin.params(sl)))
        return "".join(out)


def _namespaced_spec(spec: OutputSpec, namespace: str) -> OutputSpec:
    """Return ``spec`` with its custom configuration scoped to ``namespace``."""
    if spec.custom_plugin is None or not spec.custom_plugin.config:
        return spec
    custom = replace(
        spec.custom_plugin,
        config=make_custom_config_namespaced(spec.custom_plugin.config, namespace),
    )
    return replace(spec, custom_plugin=custom)


@dataclass(kw_only=True)
class OutputList:
    """A list of namespaced outputs."""

    items: list[Output] = field(default_factory=list)

    def load(self, sl: SecretLoader) -> str:
        """Render every output plugin with matches scoped to its namespace."""
        out: list[str] = []
        for item in sorted(self.items, key=lambda i: i.metadata.name):
            namespace = item.metadata.namespace
            spec = _namespaced_spec(item.spec, namespace)
            for plugin in spec.plugins():
                out.append("[Output]\n")
                if plugin.name():
                    out.append(f"    Name    {plugin.name()}\n")
                if spec.match:
                    expr = generate_namespaced_match_expr(namespace, spec.match)
                    out.append(f"    Match    {expr}\n")
                if spec.match_regex:
                    expr = generate_namespaced_match_regexpr(namespace, spec.match_regex)
                    out.append(f"    Match_Regex    {expr}\n")
                if spec.alias:
                    out.append(f"    Alias    {spec.alias}\n")
                if spec.retry_limit:
                    out.append(f"    Retry_Limit    {spec.retry_limit}\n")
                out.append(str(plugin.params(sl)))
        return "".join(out)