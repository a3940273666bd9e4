"""The modify filter, which changes records with rules and conditions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import CommonParams, KVs, Plugin, SecretLoader


@dataclass(kw_only=True)
class Condition:
    """Conditions that must all hold for the rules to apply."""

    key_exists: str = ""
    key_does_not_exist: dict[str, str] = field(default_factory=dict)
    a_key_matches: str = ""
    no_key_matches: str = ""
    key_value_equals: dict[str, str] = field(default_factory=dict)
    key_value_does_not_equal: dict[str, str] = field(default_factory=dict)
    key_value_matches: dict[str, str] = field(default_factory=dict)
    key_value_does_not_match: dict[str, str] = field(default_factory=dict)
    matching_keys_have_matching_values: dict[str, str] = field(default_factory=dict)
    matching_keys_do_not_have_matching_values: dict[str, str] = field(default_factory=dict)


@dataclass(kw_only=True)
class Rule:
    """Rules applied to records in order."""

    set: dict[str, str] = field(default_factory=dict)
    add: dict[str, str] = field(default_factory=dict)
    remove: str = ""
    remove_wildcard: str = ""
    remove_regex: str = ""
    rename: dict[str, str] = field(default_factory=dict)
    hard_rename: dict[str, str] = field(default_factory=dict)
    copy: dict[str, str] = field(default_factory=dict)
    hard_copy: dict[str, str] = field(default_factory=dict)


def _condition_map(kvs: KVs, mapping: dict[str, str], label: str) -> None:
    kvs.insert_string_map(
        mapping, lambda k, v: ("Condition", f"{label}    {k}    {v}")
    )


def _rule_map(kvs: KVs, mapping: dict[str, str], key: str) -> None:
    kvs.insert_string_map(mapping, lambda k, v: (key, f"{k}    {v}"))


@dataclass(kw_only=True)
class Modify(CommonParams, Plugin):
    """Changes records using rules and conditions."""

    conditions: list[Condition] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)

    def name(self) -> str:
        return "modify"

    def params(self, sl: SecretLoader) -> KVs:
        kvs = KVs()
        self.add_common_params(kvs)
        for c in self.conditions or ():
            if c.key_exists:
                kvs.insert("Condition", f"Key_exists    {c.key_exists}")
            _condition_map(kvs, c.key_does_not_exist, "Key_does_not_exist")
            if c.a_key_matches:
                kvs.insert("Condition", f"A_key_matches    {c.a_key_matches}")
            if c.no_key_matches:
                kvs.insert("Condition", f"No_key_matches    {c.no_key_matches}")
            _condition_map(kvs, c.key_value_equals, "Key_value_equals")
            _condition_map(kvs, c.key_value_does_not_equal, "Key_value_does_not_equal")
            _condition_map(kvs, c.key_value_matches, "Key_value_matches")
            _condition_map(kvs, c.key_value_does_not_match, "Key_value_does_not_match")
            _condition_map(
                kvs,
                c.matching_keys_have_matching_values,
                "Matching_keys_have_matching_values",
            )
            _condition_map(
                kvs,
                c.matching_keys_do_not_have_matching_values,
                "Matching_keys_do_not_have_matching_values",
            )
        for r in self.rules or ():
            _rule_map(kvs, r.set, "Set")
            _rule_map(kvs, r.add, "Add")
            if r.remove:
                kvs.insert("Remove", r.remove)
            if r.remove_wildcard:
                kvs.insert("Remove_wildcard", r.remove_wildcard)
            if r.remove_regex:
                kvs.insert("Remove_regex", r.remove_regex)
            _rule_map(kvs, r.rename, "Rename")
            _rule_map(kvs, r.hard_rename, "Hard_rename")
            _rule_map(kvs, r.copy, "Copy")
            _rule_map(kvs, r.hard_copy, "Hard_copy")
        return kvs