"""Tests for DomainTree construction."""

import copy

from assetviz.domain.tree import count_nodes, insert_domain, iter_leaves, new_tree, tree_depth


def _build(*domains: str) -> dict:
    tree = new_tree()
    for domain in domains:
        insert_domain(tree, domain)
    return tree


class TestInsertDomain:
    def test_nested_suffix_keys(self) -> None:
        assert _build("a.b.example.com") == {
            "com": {"example.com": {"b.example.com": {"a.b.example.com": {}}}}
        }

    def test_registrable_domain_is_leaf(self) -> None:
        assert _build("example.com") == {"com": {"example.com": {}}}

    def test_multi_label_suffix_stays_under_bare_tld(self) -> None:
        assert _build("mail.example.co.uk") == {
            "uk": {"co.uk": {"example.co.uk": {"mail.example.co.uk": {}}}}
        }

    def test_idempotent(self) -> None:
        once = _build("a.b.example.com")
        twice = _build("a.b.example.com", "a.b.example.com")
        assert once == twice

    def test_reinsert_does_not_touch_existing_nodes(self) -> None:
        tree = _build("a.example.com", "b.example.com")
        before = copy.deepcopy(tree)
        node = tree["com"]["example.com"]
        insert_domain(tree, "a.example.com")
        assert tree == before
        assert tree["com"]["example.com"] is node

    def test_shared_suffix_merges_into_one_node(self) -> None:
        tree = new_tree()
        insert_domain(tree, "a.example.com")
        shared = tree["com"]["example.com"]
        insert_domain(tree, "b.example.com")
        assert tree["com"]["example.com"] is shared
        assert set(shared) == {"a.example.com", "b.example.com"}
        assert shared["a.example.com"] == {}
        assert shared["b.example.com"] == {}

    def test_parent_inserted_after_child_keeps_child(self) -> None:
        tree = _build("www.example.com", "example.com")
        assert tree == {"com": {"example.com": {"www.example.com": {}}}}

    def test_separate_tlds(self) -> None:
        tree = _build("example.com", "example.org")
        assert set(tree) == {"com", "org"}

    def test_case_variants_are_distinct(self) -> None:
        tree = _build("Example.com", "example.com")
        assert set(tree["com"]) == {"Example.com", "example.com"}

    def test_insertion_order_irrelevant(self) -> None:
        domains = ["a.example.com", "b.example.com", "x.y.example.org", "example.net"]
        assert _build(*domains) == _build(*reversed(domains))

    def test_deepest_chain_reconstructs_domain(self) -> None:
        domain = "deep.a.b.example.com"
        chain = next(iter_leaves(_build(domain)))
        assert chain[-1] == domain
        labels = domain.split(".")
        assert chain[0] == labels[-1]
        assert chain[1] == ".".join(labels[-2:])


class TestTreeHelpers:
    def test_count_nodes(self) -> None:
        assert count_nodes(new_tree()) == 0
        assert count_nodes(_build("a.example.com", "b.example.com")) == 4

    def test_tree_depth(self) -> None:
        assert tree_depth(new_tree()) == 0
        assert tree_depth(_build("example.com")) == 2
        assert tree_depth(_build("example.com", "a.b.example.org")) == 4

    def test_iter_leaves_sorted(self) -> None:
        tree = _build("b.example.com", "a.example.com", "example.org")
        assert list(iter_leaves(tree)) == [
            ("com", "example.com", "a.example.com"),
            ("com", "example.com", "b.example.com"),
            ("org", "example.org"),
        ]

    def test_iter_leaves_empty(self) -> None:
        assert list(iter_leaves(new_tree())) == []
