"""Scope tracking helpers for ESTree JavaScript ASTs."""

from .patterns import pattern_names
from .scope_tracker import (
    Declaration,
    Scope,
    ScopeKind,
    ScopeStackError,
    ScopeVisitors,
    Target,
    classify_scope,
    create_visitors,
    declared_names,
    own_names,
)

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
    "pattern_names",
]
