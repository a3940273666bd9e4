"""Free-form plugin configuration and namespace-scoped match expressions."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .base import KVs, Plugin, SecretLoader


def namespace_hash(namespace: str) -> str:
    """Hex MD5 digest of the namespace, used to scope tags."""
    return hashlib.md5(namespace.encode()).hexdigest()


def generate_namespaced_match_expr(namespace: str, match: str) -> str:
    """Prefix a match pattern with the namespace hash."""
    return f"{namespace_hash(namespace)}.{match}"


def generate_namespaced_match_regexpr(namespace: str, match_regex: str) -> str:
    """Prefix a match regex with an anchored, escaped namespace hash."""
    return f"^{namespace_hash(namespace)}\\.{match_regex.removeprefix('^')}"


def _indentation(text: str) -> str:
    return "".join(f"    {line.strip()}\n" for line in text.split("\n") if line)


def make_custom_config_namespaced(custom_config: str, namespace: str) -> str:
    """Rewrite ``Match`` and ``Match_Regex`` lines of a config to be namespace-scoped."""
    out = []
    for section in custom_config.split("\n"):
        section = section.strip()
        last_word = section[section.rfind(" ") + 1:]
        if section.startswith("Match_Regex"):
            out.append(f"Match_Regex {generate_namespaced_match_regexpr(namespace, last_word)}\n")
        elif section.startswith("Match"):
            out.append(f"Match {generate_namespaced_match_expr(namespace, last_word)}\n")
        else:
            out.append(f"{section}\n")
    return "".join(out)


@dataclass(kw_only=True)
class CustomPlugin(Plugin):
    """A plugin given as raw configuration lines."""

    config: str = ""

    def name(self) -> str:
        return ""

    def params(self, sl: SecretLoader) -> KVs:
        return KVs(content=_indentation(self.config))