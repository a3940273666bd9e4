from fluentbitcfg.plugins.base import SecretLoader
from fluentbitcfg.plugins.inputs import (
    Dummy,
    FluentbitMetrics,
    NodeExporterMetrics,
    NodeExporterPath,
    PrometheusScrapeMetrics,
    Systemd,
)

SL = SecretLoader(None, "testnamespace")


def test_dummy_params():
    d = Dummy(tag="logs.foo.bar", rate=3, samples=5)
    assert d.name() == "dummy"
    assert str(d.params(SL)) == "    Tag    logs.foo.bar\n    Rate    3\n    Samples    5\n"


def test_dummy_empty_has_no_params():
    assert Dummy().params(SL).pairs == []


def test_fluentbit_metrics_params():
    m = FluentbitMetrics(tag="logs.foo.bar", scrape_interval="2", scrape_on_start=True)
    assert m.name() == "fluentbit_metrics"
    assert str(m.params(SL)) == (
        "    Tag    logs.foo.bar\n    scrape_interval    2\n    scrape_on_start    true\n"
    )


def test_node_exporter_params():
    m = NodeExporterMetrics(
        tag="node", scrape_interval="5s",
        path=NodeExporterPath(procfs="/host/proc", sysfs="/host/sys"),
    )
    assert m.name() == "node_exporter_metrics"
    assert m.params(SL).pairs == [
        ("Tag", "node"),
        ("scrape_interval", "5s"),
        ("path.procfs", "/host/proc"),
        ("path.sysfs", "/host/sys"),
    ]


def test_prometheus_scrape_params():
    p = PrometheusScrapeMetrics(
        tag="logs.foo.bar", host="https://example3.com", port=433,
        scrape_interval="10s", metrics_path="/metrics",
    )
    assert p.name() == "prometheus_scrape"
    assert str(p.params(SL)) == (
        "    tag    logs.foo.bar\n    host    https://example3.com\n    port    433\n"
        "    scrape_interval    10s\n    metrics_path    /metrics\n"
    )


def test_prometheus_scrape_default_host():
    for host in ("", "HOST", "host"):
        pairs = PrometheusScrapeMetrics(host=host).params(SL).pairs
        assert pairs == [("host", "${HOST_IP}")]


def test_systemd_params_order():
    s = Systemd(
        path="/var/log/journal", db="/fluent-bit/tail/systemd.db", db_sync="Normal",
        tag="service.*", systemd_filter=["_SYSTEMD_UNIT=docker.service", "_SYSTEMD_UNIT=kubelet.service"],
        systemd_filter_type="Or", read_from_tail="on", strip_underscores="off",
        storage_type="filesystem", pause_on_chunks_overlimit="on",
    )
    assert s.name() == "systemd"
    keys = [k for k, _ in s.params(SL).pairs]
    assert keys == [
        "Path", "DB", "DB.Sync", "Tag", "Systemd_Filter", "Systemd_Filter",
        "Systemd_Filter_Type", "Read_From_Tail", "Strip_Underscores",
        "storage.type", "storage.pause_on_chunks_overlimit",
    ]


def test_systemd_max_fields_written_as_code_point():
    pairs = dict(Systemd(max_fields=65, max_entries=66).params(SL).pairs)
    assert pairs["Max_Fields"] == "A"
    assert pairs["Max_Entries"] == "B"


def test_systemd_zero_limits_omitted():
    pairs = dict(Systemd(max_fields=0, max_entries=0).params(SL).pairs)
    assert "Max_Fields" not in pairs
    assert "Max_Entries" not in pairs