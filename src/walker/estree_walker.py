"""
Depth-first traversal of the JSON-compatible ASTs produced by esprima.

`walk` visits every node (any dict carrying a `"type"`) in source order, calling
`enter(node)` before its children and `leave(node)` after them. Child order
follows the node's key order, which esprima emits in grammar order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

Visitor = Callable[[Dict[str, Any]], None]

_SKIPPED_KEYS = {"loc", "range", "comments", "errors", "tokens"}


def walk(
    tree: Any,
    enter: Optional[Visitor] = None,
    leave: Optional[Visitor] = None,
) -> None:
    """
    Traverse `tree`, invoking the callbacks around each node.

    Args:
        tree: Root node (usually a `Program`) or a list of nodes.
        enter: Called with each node before its children are visited.
        leave: Called with each node after its children are visited.
    """
    if isinstance(tree, list):
        for element in tree:
            walk(element, enter, leave)
        return
    if not isinstance(tree, dict) or "type" not in tree:
        return

    if enter:
        enter(tree)
    for key, value in tree.items():
        if key in _SKIPPED_KEYS or not isinstance(value, (dict, list)):
            continue
        walk(value, enter, leave)
    if leave:
        leave(tree)


__all__ = ["walk"]
