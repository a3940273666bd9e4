import pytest

from fluentbitcfg.input_resources import ClusterInput, ClusterInputList, InputSpec
from fluentbitcfg.meta import ObjectMeta
from fluentbitcfg.plugins.base import KVs, Plugin, SecretLoader
from fluentbitcfg.plugins.custom import CustomPlugin
from fluentbitcfg.plugins.inputs import Dummy, FluentbitMetrics, PrometheusScrapeMetrics
from fluentbitcfg.plugins.tail import Tail

SL = SecretLoader(None, "testnamespace")

LABELS = {
    "label0": "lv0",
    "label1": "lv1",
    "label3": "lval3",
    "lbl2": "lval2",
    "lbl1": "lvl1",
}

INPUT_EXPECTED = """[Input]
    Name    tail
    Alias    input0_alias
    Path    /logs/containers/apps0
    Exclude_Path    /logs/containers/exclude_path
    Refresh_Interval    10
    Ignore_Older    5m
    Skip_Long_Lines    true
    DB    /fluent-bit/tail/pos.db
    Mem_Buf_Limit    5MB
    Parser    docker
    Tag    logs.foo.bar
    Docker_Mode    true
    Docker_Mode_Flush    4
    Docker_Mode_Parser    docker-mode-parser
    Inotify_Watcher    false
[Input]
    Name    dummy
    Alias    input2_alias
    Tag    logs.foo.bar
    Rate    3
    Samples    5
[Input]
    Name    prometheus_scrape
    Alias    input3_alias
    tag    logs.foo.bar
    host    https://example3.com
    port    433
    scrape_interval    10s
    metrics_path    /metrics
"""

FLUENTBIT_EXPECTED = """[Input]
    Name    fluentbit_metrics
    Alias    input0_alias
    Tag    logs.foo.bar
    scrape_interval    2
    scrape_on_start    true
"""


def _input(name, spec):
    return ClusterInput(metadata=ObjectMeta(name=name, labels=dict(LABELS)), spec=spec)


def test_cluster_input_list_load():
    input1 = _input(
        "input0",
        InputSpec(
            alias="input0_alias",
            tail=Tail(
                disable_inotify_watcher=True,
                tag="logs.foo.bar",
                path="/logs/containers/apps0",
                exclude_path="/logs/containers/exclude_path",
                skip_long_lines=True,
                ignore_older="5m",
                mem_buf_limit="5MB",
                refresh_interval_seconds=10,
                db="/fluent-bit/tail/pos.db",
                parser="docker",
                docker_mode=True,
                docker_mode_flush_seconds=4,
                docker_mode_parser="docker-mode-parser",
            ),
        ),
    )
    input2 = _input(
        "input2",
        InputSpec(alias="input2_alias", dummy=Dummy(tag="logs.foo.bar", rate=3, samples=5)),
    )
    input3 = _input(
        "input3",
        InputSpec(
            alias="input3_alias",
            prometheus_scrape_metrics=PrometheusScrapeMetrics(
                tag="logs.foo.bar",
                host="https://example3.com",
                port=433,
                scrape_interval="10s",
                metrics_path="/metrics",
            ),
        ),
    )
    inputs = ClusterInputList(items=[input1, input2, input3])
    for _ in range(5):
        assert inputs.load(SL) == INPUT_EXPECTED


def test_fluentbit_metrics_cluster_input_list_load():
    input1 = _input(
        "input0",
        InputSpec(
            alias="input0_alias",
            fluent_bit_metrics=FluentbitMetrics(
                tag="logs.foo.bar", scrape_interval="2", scrape_on_start=True
            ),
        ),
    )
    inputs = ClusterInputList(items=[input1])
    for _ in range(5):
        assert inputs.load(SL) == FLUENTBIT_EXPECTED


def test_items_are_ordered_by_name():
    b = _input("b", InputSpec(dummy=Dummy(tag="b")))
    a = _input("a", InputSpec(dummy=Dummy(tag="a")))
    out = ClusterInputList(items=[b, a]).load(SL)
    assert out.index("Tag    a") < out.index("Tag    b")


def test_empty_list_renders_nothing():
    assert ClusterInputList().load(SL) == ""


def test_log_level_and_custom_plugin_without_name():
    item = _input(
        "custom",
        InputSpec(log_level="debug", custom_plugin=CustomPlugin(config="Name  cpu\nTag  cpu")),
    )
    out = ClusterInputList(items=[item]).load(SL)
    assert out == "[Input]\n    Log_Level    debug\n    Name  cpu\n    Tag  cpu\n"


def test_plugins_in_declaration_order():
    dummy = Dummy(tag="d")
    tail = Tail(path="/x")
    spec = InputSpec(tail=tail, dummy=dummy)
    assert spec.plugins() == [dummy, tail]
    assert InputSpec(alias="only-alias").plugins() == []


class _FailingPlugin(Plugin):
    def name(self) -> str:
        return "failing"

    def params(self, sl: SecretLoader) -> KVs:
        raise LookupError("secret missing")


def test_plugin_errors_propagate():
    item = _input("bad", InputSpec(dummy=_FailingPlugin()))
    with pytest.raises(LookupError, match="secret missing"):
        ClusterInputList(items=[item]).load(SL)