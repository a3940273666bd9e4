# fluentbitcfg

Describe Fluent Bit inputs and outputs as Python objects, cluster-wide or per
namespace, and render them into `[Input]` and `[Output]` sections of the
classic Fluent Bit configuration text.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from fluentbitcfg.meta import ObjectMeta
from fluentbitcfg.plugins.base import SecretLoader
from fluentbitcfg.plugins.custom import CustomPlugin
from fluentbitcfg.plugins.tail import Tail
from fluentbitcfg.input_resources import ClusterInput, ClusterInputList, InputSpec
from fluentbitcfg.output_resources import ClusterOutput, ClusterOutputList, OutputSpec

sl = SecretLoader(namespace="logging")

inputs = ClusterInputList(items=[
    ClusterInput(
        metadata=ObjectMeta(name="tail"),
        spec=InputSpec(tail=Tail(path="/var/log/containers/*.log", tag="kube.*")),
    ),
])

outputs = ClusterOutputList(items=[
    ClusterOutput(
        metadata=ObjectMeta(name="stdout"),
        spec=OutputSpec(custom_plugin=CustomPlugin(config="Name stdout\nMatch *")),
    ),
])

print(inputs.load(sl) + outputs.load(sl))
```

This prints:

```
[Input]
    Name    tail
    Path    /var/log/containers/*.log
    Tag    kube.*
[Output]
    Name stdout
    Match *
```

Each `load` call sorts the resources by `metadata.name`, so the text does not
change from one run to the next. `ClusterInputList.load` sorts its `items`
list in place; the output lists render from a sorted copy.

## Plugins

Every plugin is a dataclass deriving from `fluentbitcfg.plugins.base.Plugin`,
with a `name()` and a `params(sl)` that returns a `KVs` list of key/value
pairs. Unset fields are left out; booleans are written as `true`/`false`.

- Inputs: `Tail` (`fluentbitcfg.plugins.tail`); `Dummy`, `FluentbitMetrics`,
  `NodeExporterMetrics`, `PrometheusScrapeMetrics` and `Systemd`
  (`fluentbitcfg.plugins.inputs`).
- Filters: `Kubernetes` (`fluentbitcfg.plugins.kubernetes`) and `Modify` with
  its `Condition` and `Rule` (`fluentbitcfg.plugins.modify`). Map-valued
  conditions and rules are written in key order.
- `CustomPlugin` (`fluentbitcfg.plugins.custom`) takes raw configuration lines
  and re-indents them; it has no `Name` of its own.

`CommonParams` adds `Alias` and `Retry_Limit`; `Kubernetes` and `Modify` use
it.

## Namespaced outputs

`Output` and `OutputList` belong to a namespace. When rendered, `Match` becomes
`<hash>.<match>` and `Match_Regex` becomes `^<hash>\.<regex>`, where `<hash>`
is the hex MD5 of the namespace (`namespace_hash`). `Match` and `Match_Regex`
lines inside a `CustomPlugin` config are rewritten the same way by
`make_custom_config_namespaced`. Records from different namespaces therefore
stay apart.

## Config maps

`fluentbitcfg.plugins.configmap.ConfigMapLoader` reads one key of a config map
through a client object that has `get_config_map(name, namespace)` returning a
mapping. It strips one trailing newline and raises
`ConfigMapKeyNotFoundError` when the key is missing.

## What this package does not do

- It renders input and output sections only. There is no `[Service]` section,
  no whole-file renderer that joins sections together, no filter or parser
  resource lists, and no `[PARSER]` output.
- Filter plugins cannot yet be placed into a rendered `[Filter]` section; only
  their `params` are available.
- There are no dedicated output plugin classes. `OutputSpec` fields accept any
  `Plugin`; use `CustomPlugin` or write your own subclass.
- It talks to no cluster. `SecretLoader` and `ConfigMapLoader` only carry the
  client you give them.

## Modules

- `fluentbitcfg.meta`: `GroupVersion`, `GROUP_VERSION`, `ObjectMeta`, `LabelSelector`
- `fluentbitcfg.plugins.base`: `KVs`, `Plugin`, `CommonParams`, `SecretLoader`
- `fluentbitcfg.plugins.configmap`: `ConfigMapKeySelector`, `ConfigMapLoader`,
  `ConfigMapKeyNotFoundError`
- `fluentbitcfg.plugins.custom`: `CustomPlugin` and the namespacing helpers
- `fluentbitcfg.plugins.inputs`, `fluentbitcfg.plugins.tail`: input plugins
- `fluentbitcfg.plugins.kubernetes`, `fluentbitcfg.plugins.modify`: filter plugins
- `fluentbitcfg.input_resources`: `InputSpec`, `ClusterInput`, `ClusterInputList`
- `fluentbitcfg.output_resources`: `OutputSpec`, `ClusterOutput`,
  `ClusterOutputList`, `Output`, `OutputList`