"""Generic depth-first traversal of ESTree dict ASTs."""

from .estree_walker import walk

__all__ = ["walk"]
