"""
Scope tracking for ESTree JavaScript ASTs.

`create_visitors` returns an `enter`/`exit` pair meant to be driven by a generic
depth-first walker, together with the live stack of scopes they maintain. Every
scope records the names declared directly in it: `var`, function declarations
and imports hoist to the nearest function-like scope, while `let`, `const` and
classes bind in whichever scope is innermost. The stack is shared by reference,
so a caller may inspect `scopes[-1]` at any point during the walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from .patterns import pattern_names

logger = logging.getLogger(__name__)


class ScopeKind(str, Enum):
    NONE = "none"
    FUNCTION = "function"
    BLOCK = "block"


class Target(str, Enum):
    """Which frame on the stack receives a declared name."""

    CURRENT = "current"
    FUNCTION = "function"
    MODULE = "module"
    OWN = "own"


_FUNCTION_SCOPES = {
    "Program",
    "FunctionDeclaration",
    "FunctionExpression",
    "ArrowFunctionExpression",
}
_BLOCK_SCOPES = {"BlockStatement", "CatchClause", "StaticBlock"}


@dataclass
class Scope:
    """A single frame: function-like (`block=False`) or block-like."""

    block: bool
    defined: List[str] = field(default_factory=list)
    _seen: Set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._seen.update(self.defined)

    def define(self, name: str) -> bool:
        """Record `name` unless already present; return whether it was added."""
        if name in self._seen:
            return False
        self._seen.add(name)
        self.defined.append(name)
        return True


@dataclass(frozen=True)
class Declaration:
    names: List[str]
    target: Target


class ScopeStackError(RuntimeError):
    """Raised when enter/exit calls are not paired with the tree structure."""

    def __init__(self, message: str, node: Optional[Dict[str, Any]] = None):
        loc = ""
        if isinstance(node, dict):
            start = (node.get("loc") or {}).get("start") or {}
            line = start.get("line")
            column = start.get("column")
            if line is not None and column is not None:
                loc = f" (line {line}, column {column})"
        super().__init__(f"{message}{loc}")
        self.node = node


def _node_type(node: Any) -> Optional[str]:
    return node.get("type") if isinstance(node, dict) else None


def classify_scope(node: Any) -> ScopeKind:
    """Tell whether `node` opens a new scope, and of which flavour."""
    node_type = _node_type(node)
    if node_type in _FUNCTION_SCOPES:
        return ScopeKind.FUNCTION
    if node_type in _BLOCK_SCOPES:
        return ScopeKind.BLOCK
    return ScopeKind.NONE


def _id_names(node: Dict[str, Any]) -> List[str]:
    return pattern_names(node.get("id"))


def declared_names(node: Any) -> List[Declaration]:
    """
    Resolve the names `node` itself declares outside of its own scope.

    Parameters and catch parameters are not included; see `own_names`.
    Unknown node types declare nothing.
    """
    node_type = _node_type(node)

    if node_type == "VariableDeclaration":
        target = Target.FUNCTION if node.get("kind") == "var" else Target.CURRENT
        names: List[str] = []
        for declarator in node.get("declarations") or []:
            if isinstance(declarator, dict):
                names.extend(pattern_names(declarator.get("id")))
        return [Declaration(names, target)]

    if node_type == "FunctionDeclaration":
        return [Declaration(_id_names(node), Target.FUNCTION)]

    if node_type in {"FunctionExpression", "ClassDeclaration", "ClassExpression"}:
        # Resolved before the function pushes its own frame, so a named
        # function expression binds in the enclosing scope.
        return [Declaration(_id_names(node), Target.CURRENT)]

    if node_type == "ImportDeclaration":
        names = []
        for specifier in node.get("specifiers") or []:
            if isinstance(specifier, dict):
                names.extend(pattern_names(specifier.get("local")))
        return [Declaration(names, Target.MODULE)]

    return []


def own_names(node: Any) -> List[str]:
    """Names bound inside the scope that `node` opens (parameters)."""
    node_type = _node_type(node)
    if node_type in {
        "FunctionDeclaration",
        "FunctionExpression",
        "ArrowFunctionExpression",
    }:
        names: List[str] = []
        for param in node.get("params") or []:
            names.extend(pattern_names(param))
        return names
    if node_type == "CatchClause":
        return pattern_names(node.get("param"))
    return []


class ScopeVisitors:
    """Enter/exit hooks plus the scope stack they maintain."""

    def __init__(self) -> None:
        self.scopes: List[Scope] = []

    # ------------------------------------------------------------------ hooks

    def enter(self, node: Dict[str, Any]) -> None:
        for declaration in declared_names(node):
            self._declare(declaration.names, declaration.target, node)

        kind = classify_scope(node)
        if kind is ScopeKind.NONE:
            return

        self.scopes.append(Scope(block=kind is ScopeKind.BLOCK))
        logger.debug(
            "push %s scope for %s (depth %d)", kind.value, node["type"], len(self.scopes)
        )
        self._declare(own_names(node), Target.OWN, node)

    def exit(self, node: Dict[str, Any]) -> None:
        if classify_scope(node) is ScopeKind.NONE or _node_type(node) == "Program":
            return
        if len(self.scopes) < 2:
            raise ScopeStackError(
                f"Unbalanced exit for {_node_type(node)}: no scope left to pop", node
            )
        scope = self.scopes.pop()
        logger.debug("pop scope for %s: %s", node["type"], scope.defined)

    # ---------------------------------------------------------------- helpers

    def _frame(self, target: Target, node: Dict[str, Any]) -> Scope:
        if not self.scopes:
            raise ScopeStackError(
                f"{_node_type(node)} declares names before the Program was entered", node
            )
        if target is Target.MODULE:
            return self.scopes[0]
        if target is Target.FUNCTION:
            for scope in reversed(self.scopes):
                if not scope.block:
                    return scope
            return self.scopes[0]
        return self.scopes[-1]

    def _declare(self, names: List[str], target: Target, node: Dict[str, Any]) -> None:
        if not names:
            return
        scope = self._frame(target, node)
        for name in names:
            if scope.define(name):
                logger.debug("define %r in %s scope", name, target.value)


def create_visitors() -> ScopeVisitors:
    """Create a fresh, independent set of scope visitors for one traversal."""
    return ScopeVisitors()


__all__ = [
    "Declaration",
    "Scope",
    "ScopeKind",
    "ScopeStackError",
    "ScopeVisitors",
    "Target",
    "classify_scope",
    "create_visitors",
    "declared_names",
    "own_names",
]
