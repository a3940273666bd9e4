"""Reading values out of config maps."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class ConfigMapSource(Protocol):
    """Anything that can fetch the data of a config map."""

    def get_config_map(self, name: str, namespace: str) -> Mapping[str, str]:
        ...


@dataclass(frozen=True)
class ConfigMapKeySelector:
    """Selects one key of a named config map."""

    name: str
    key: str


class ConfigMapKeyNotFoundError(LookupError):
    """The selected key is not present in the config map."""


@dataclass(frozen=True)
class ConfigMapLoader:
    """Loads values from config maps through a client."""

    client: Any
    namespace: str = ""

    def load_config_map(self, selector: ConfigMapKeySelector, namespace: str) -> str:
        """Return the value for ``selector`` in ``namespace``, minus one trailing newline."""
        data = self.client.get_config_map(selector.name, namespace)
        try:
            value = data[selector.key]
        except KeyError:
            raise ConfigMapKeyNotFoundError(
                f"The key {selector.key} is not found."
            ) from None
        return str(value).removesuffix("\n")