"""DomainTree — nested mapping of domain suffixes.

The first level is keyed by the bare top-level label (``com``). Every
deeper level is keyed by the full dotted suffix from that label down to
the TLD, so ``a.b.example.com`` inserts the chain::

    com -> example.com -> b.example.com -> a.b.example.com

Domains that share a suffix share the node for it. Insertion only ever
looks up or creates keys, so inserting the same domain again is a no-op.
"""

from __future__ import annotations

from collections.abc import Iterator

type DomainTree = dict[str, DomainTree]


def new_tree() -> DomainTree:
    return {}


def insert_domain(tree: DomainTree, domain: str) -> None:
    """Insert a validated, normalized *domain* into *tree* in place."""
    labels = domain.split(".")
    tld_index = len(labels) - 1
    current = tree

    for i in range(tld_index, -1, -1):
        key = labels[i] if i == tld_index else ".".join(labels[i:])
        current = current.setdefault(key, {})


def count_nodes(tree: DomainTree) -> int:
    """Total number of keys at every depth."""
    return sum(1 + count_nodes(child) for child in tree.values())


def tree_depth(tree: DomainTree) -> int:
    """Length of the longest root-to-leaf key chain (0 for an empty tree)."""
    if not tree:
        return 0
    return 1 + max(tree_depth(child) for child in tree.values())


def iter_leaves(tree: DomainTree) -> Iterator[tuple[str, ...]]:
    """Yield every root-to-leaf key chain, in sorted key order."""
    for key in sorted(tree):
        child = tree[key]
        if not child:
            yield (key,)
            continue
        for chain in iter_leaves(child):
            yield (key, *chain)
