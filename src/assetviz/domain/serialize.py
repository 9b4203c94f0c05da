"""DomainTree serialization for embedding in an HTML ``<script>`` block."""

from __future__ import annotations

import json
from typing import Any

from assetviz.domain.tree import DomainTree

# Characters that can end a script element or break a JS string literal.
_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class TreeSerializationError(ValueError):
    """Raised when a tree contains something other than str -> mapping."""


def _check_tree(tree: Any, path: tuple[str, ...] = ()) -> None:
    if not isinstance(tree, dict):
        where = "/".join(path) or "<root>"
        msg = f"Node at {where} is {type(tree).__name__}, expected a mapping"
        raise TreeSerializationError(msg)
    for key, child in tree.items():
        if not isinstance(key, str):
            msg = f"Non-string key {key!r} under {'/'.join(path) or '<root>'}"
            raise TreeSerializationError(msg)
        _check_tree(child, (*path, key))


def serialize_tree(tree: DomainTree, *, indent: int | None = 2) -> str:
    """Return sorted, indented JSON for *tree* that is safe inside ``<script>``.

    ``json.loads`` on the result gives back a mapping equal to *tree*.
    """
    _check_tree(tree)
    text = json.dumps(tree, sort_keys=True, indent=indent, ensure_ascii=False)
    for char, escaped in _SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return text
