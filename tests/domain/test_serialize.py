"""Tests for script-safe tree serialization."""

import json

import pytest

from assetviz.domain.serialize import TreeSerializationError, serialize_tree
from assetviz.domain.tree import insert_domain, new_tree


class TestSerializeTree:
    def test_scenario_tree(self) -> None:
        tree = new_tree()
        insert_domain(tree, "a.b.example.com")
        assert json.loads(serialize_tree(tree)) == {
            "com": {"example.com": {"b.example.com": {"a.b.example.com": {}}}}
        }

    def test_empty_tree(self) -> None:
        assert serialize_tree(new_tree()) == "{}"

    def test_keys_sorted_regardless_of_insertion_order(self) -> None:
        first = new_tree()
        second = new_tree()
        for domain in ["z.example.com", "a.example.com", "example.org"]:
            insert_domain(first, domain)
        for domain in ["example.org", "a.example.com", "z.example.com"]:
            insert_domain(second, domain)
        assert serialize_tree(first) == serialize_tree(second)
        text = serialize_tree(first)
        assert text.index('"com"') < text.index('"org"')
        assert text.index('"a.example.com"') < text.index('"z.example.com"')

    def test_indented(self) -> None:
        tree = {"com": {"example.com": {}}}
        assert serialize_tree(tree) == '{\n  "com": {\n    "example.com": {}\n  }\n}'

    def test_compact(self) -> None:
        assert serialize_tree({"com": {}}, indent=None) == '{"com": {}}'

    def test_script_breaking_characters_escaped(self) -> None:
        tree = {"com": {"</script><b>&.com": {}, "a\u2028b.com": {}}}
        text = serialize_tree(tree)
        for raw in ("<", ">", "&", "\u2028"):
            assert raw not in text
        assert "\\u003c/script\\u003e" in text
        assert json.loads(text) == tree

    def test_non_ascii_kept_readable(self) -> None:
        tree = {"de": {"bücher.de": {}}}
        assert "bücher.de" in serialize_tree(tree)

    def test_rejects_non_mapping_node(self) -> None:
        with pytest.raises(TreeSerializationError, match="com/example.com"):
            serialize_tree({"com": {"example.com": ["oops"]}})  # type: ignore[dict-item]

    def test_rejects_non_string_key(self) -> None:
        with pytest.raises(TreeSerializationError, match="Non-string key"):
            serialize_tree({"com": {1: {}}})  # type: ignore[dict-item]
