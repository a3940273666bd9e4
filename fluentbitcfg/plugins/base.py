"""Core plugin protocol, key/value parameter list and common parameters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class KVs:
    """Ordered key/value parameters of one configuration section.

    Keys may repeat. ``content`` holds pre-rendered text appended after the
    key/value lines.
    """

    pairs: list[tuple[str, str]] = field(default_factory=list)
    content: str = ""

    def insert(self, key: str, value: Any) -> None:
        """Append a parameter; booleans are rendered as ``true``/``false``."""
        self.pairs.append((key, _format_value(value)))

    def insert_string_map(
        self,
        mapping: Mapping[str, str] | None,
        transform: Callable[[str, str], tuple[str, str]],
    ) -> None:
        """Insert every entry of ``mapping`` in key order, via ``transform``."""
        if not mapping:
            return
        for key in sorted(mapping):
            self.insert(*transform(key, mapping[key]))

    def __str__(self) -> str:
        lines = "".join(f"    {key}    {value}\n" for key, value in self.pairs)
        return lines + self.content


class Plugin(ABC):
    """A plugin that renders itself as a section of the configuration."""

    @abstractmethod
    def name(self) -> str:
        """The plugin name written as ``Name`` (or ``Format``)."""

    @abstractmethod
    def params(self, sl: SecretLoader) -> KVs:
        """The plugin parameters."""


@dataclass(kw_only=True)
class CommonParams:
    """Parameters shared by many plugins."""

    alias: str = ""
    retry_limit: str = ""

    def add_common_params(self, kvs: KVs) -> None:
        """Add ``Alias`` and ``Retry_Limit`` to ``kvs`` when they are set."""
        if self.alias:
            kvs.insert("Alias", self.alias)
        if self.retry_limit:
            kvs.insert("Retry_Limit", self.retry_limit)


@dataclass(frozen=True)
class SecretLoader:
    """Carries the cluster client and the namespace secrets are read from."""

    client: Any = None
    namespace: str = ""

    def for_namespace(self, namespace: str) -> SecretLoader:
        """Return a loader sharing this client but bound to ``namespace``."""
        return replace(self, namespace=namespace)