"""Input plugins: dummy, fluentbit metrics, node exporter, prometheus scrape, systemd."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import KVs, Plugin, SecretLoader


def _rune_string(code: int) -> str:
    if 0xD800 <= code <= 0xDFFF or code > 0x10FFFF or code < 0:
        return "\ufffd"
    return chr(code)


@dataclass(kw_only=True)
class Dummy(Plugin):
    """Generates dummy events."""

    tag: str = ""
    dummy: str = ""
    rate: int | None = None
    samples: int | None = None

    def name(self) -> str:
        return "dummy"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        if self.tag:
            kvs.insert("Tag", self.tag)
        if self.dummy:
            kvs.insert("Dummy", self.dummy)
        if self.rate is not None:
            kvs.insert("Rate", self.rate)
        if self.samples is not None:
            kvs.insert("Samples", self.samples)
        return kvs


@dataclass(kw_only=True)
class FluentbitMetrics(Plugin):
    """Collects Fluent Bit's own metrics."""

    tag: str = ""
    scrape_interval: str = ""
    scrape_on_start: bool | None = None

    def name(self) -> str:
        return "fluentbit_metrics"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        if self.tag:
            kvs.insert("Tag", self.tag)
        if self.scrape_interval:
            kvs.insert("scrape_interval", self.scrape_interval)
        if self.scrape_on_start is not None:
            kvs.insert("scrape_on_start", self.scrape_on_start)
        return kvs


@dataclass(kw_only=True)
class NodeExporterPath:
    """Filesystem mount points used by the node exporter."""

    procfs: str = ""
    sysfs: str = ""


@dataclass(kw_only=True)
class NodeExporterMetrics(Plugin):
    """Collects host level metrics."""

    tag: str = ""
    scrape_interval: str = ""
    path: NodeExporterPath | None = None

    def name(self) -> str:
        return "node_exporter_metrics"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        if self.tag:
            kvs.insert("Tag", self.tag)
        if self.scrape_interval:
            kvs.insert("scrape_interval", self.scrape_interval)
        if self.path is not None:
            if self.path.procfs:
                kvs.insert("path.procfs", self.path.procfs)
            if self.path.sysfs:
                kvs.insert("path.sysfs", self.path.sysfs)
        return kvs


@dataclass(kw_only=True)
class PrometheusScrapeMetrics(Plugin):
    """Scrapes a Prometheus metrics endpoint."""

    tag: str = ""
    host: str = ""
    port: int | None = None
    scrape_interval: str = ""
    metrics_path: str = ""

    def name(self) -> str:
        return "prometheus_scrape"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        if self.tag:
            kvs.insert("tag", self.tag)
        if self.host.lower() in ("", "host"):
            kvs.insert("host", "${HOST_IP}")
        else:
            kvs.insert("host", self.host)
        if self.port is not None:
            kvs.insert("port", self.port)
        if self.scrape_interval:
            kvs.insert("scrape_interval", self.scrape_interval)
        if self.metrics_path:
            kvs.insert("metrics_path", self.metrics_path)
        return kvs


@dataclass(kw_only=True)
class Systemd(Plugin):
    """Reads messages from the systemd journal."""

    path: str = ""
    db: str = ""
    db_sync: str = ""
    tag: str = ""
    max_fields: int = 0
    max_entries: int = 0
    systemd_filter: list[str] = field(default_factory=list)
    systemd_filter_type: str = ""
    read_from_tail: str = ""
    strip_underscores: str = ""
    storage_type: str = ""
    pause_on_chunks_overlimit: str = ""

    def name(self) -> str:
        return "systemd"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        if self.path:
            kvs.insert("Path", self.path)
        if self.db:
            kvs.insert("DB", self.db)
        if self.db_sync:
            kvs.insert("DB.Sync", self.db_sync)
        if self.tag:
            kvs.insert("Tag", self.tag)
        # The count is written as the character with that code point.
        if self.max_fields > 0:
            kvs.insert("Max_Fields", _rune_string(self.max_fields))
        if self.max_entries > 0:
            kvs.insert("Max_Entries", _rune_string(self.max_entries))
        for value in self.systemd_filter or ():
            kvs.insert("Systemd_Filter", value)
        if self.systemd_filter_type:
            kvs.insert("Systemd_Filter_Type", self.systemd_filter_type)
        if self.read_from_tail:
            kvs.insert("Read_From_Tail", self.read_from_tail)
        if self.strip_underscores:
            kvs.insert("Strip_Underscores", self.strip_underscores)
        if self.storage_type:
            kvs.insert("storage.type", self.storage_type)
        if self.pause_on_chunks_overlimit:
            kvs.insert("storage.pause_on_chunks_overlimit", self.pause_on_chunks_overlimit)
        return kvs