"""Interfaces for parsing JavaScript source code."""

from .estree_parser import SOURCE_TYPES, ParseError, ParseResult, parse_js

__all__ = ["ParseError", "ParseResult", "SOURCE_TYPES", "parse_js"]
