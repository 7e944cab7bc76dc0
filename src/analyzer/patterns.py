"""
Binding pattern flattening for ESTree declarations.

A declaration such as `var [a, {b = 1, ...c}] = value` binds several names
through a nested pattern. `pattern_names` reduces any pattern to the ordered
list of identifiers it binds. Shapes it does not recognise bind nothing.
"""

from __future__ import annotations

from typing import Any, List


def pattern_names(pattern: Any) -> List[str]:
    """
    Return the names bound by `pattern`, left to right.

    Args:
        pattern: ESTree pattern node (dict) or `None` for an elided slot.

    Returns:
        A new list of identifier names; empty for unsupported shapes.
    """
    if not isinstance(pattern, dict):
        return []

    node_type = pattern.get("type")

    if node_type == "Identifier":
        name = pattern.get("name")
        return [name] if isinstance(name, str) else []

    if node_type == "ArrayPattern":
        names: List[str] = []
        for element in pattern.get("elements") or []:
            names.extend(pattern_names(element))
        return names

    if node_type == "ObjectPattern":
        names = []
        for prop in pattern.get("properties") or []:
            if isinstance(prop, dict) and prop.get("type") == "RestElement":
                names.extend(pattern_names(prop))
            elif isinstance(prop, dict):
                names.extend(pattern_names(prop.get("value")))
        return names

    if node_type == "AssignmentPattern":
        # The default value is an expression, never a binding.
        return pattern_names(pattern.get("left"))

    if node_type == "RestElement":
        return pattern_names(pattern.get("argument"))

    return []


__all__ = ["pattern_names"]
