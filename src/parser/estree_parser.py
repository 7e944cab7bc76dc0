"""
JavaScript parsing built on the Python `esprima` port.

`parse_js` turns source text into the JSON-compatible ESTree AST consumed by the
scope visitors, plus metadata about the run. Scripts and ES modules are both
supported; modules are required for `import`/`export` declarations.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, List, Optional

import esprima

SOURCE_TYPES = ("script", "module")


@dataclass(frozen=True)
class ParseError:
    """A recoverable parsing issue reported by esprima."""

    description: str
    line: Optional[int]
    column: Optional[int]


@dataclass(frozen=True)
class ParseResult:
    ast: Any
    errors: List[ParseError]
    source_hash: str
    source_name: str

    def to_json(self) -> str:
        """Serialise the parse result for caching."""
        payload = {
            "ast": self.ast,
            "errors": [error.__dict__ for error in self.errors],
            "source_hash": self.source_hash,
            "source_name": self.source_name,
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)


def _hash_source(source: str) -> str:
    return hashlib.sha256(source.encode("utf-8")).hexdigest()


def parse_js(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
    source_type: str = "script",
) -> ParseResult:
    """
    Parse JavaScript source text into an ESTree AST.

    Args:
        source: Raw JavaScript source code.
        source_name: Label used for diagnostics.
        tolerant: When True, esprima recovers from errors instead of raising.
        source_type: `"script"` or `"module"`.

    Returns:
        ParseResult with the AST (`None` when recovery failed) and any errors.

    Raises:
        ValueError: If `source_type` is unknown.
        esprima.Error: If parsing fails and `tolerant` is False.
    """
    if source_type not in SOURCE_TYPES:
        raise ValueError(f"source_type must be one of {SOURCE_TYPES}, got {source_type!r}")

    options = dict(loc=True, range=True, tolerant=tolerant)
    parse = esprima.parseModule if source_type == "module" else esprima.parseScript
    try:
        ast = parse(source, **options)
    except esprima.Error as exc:
        if not tolerant:
            raise
        return ParseResult(
            ast=None,
            errors=[
                ParseError(
                    description=getattr(exc, "description", None) or str(exc),
                    line=getattr(exc, "lineNumber", None),
                    column=getattr(exc, "column", None),
                )
            ],
            source_hash=_hash_source(source),
            source_name=source_name,
        )

    raw_ast = ast.toDict() if hasattr(ast, "toDict") else ast

    errors: List[ParseError] = []
    if tolerant and isinstance(raw_ast, dict):
        for error in raw_ast.get("errors") or []:
            errors.append(
                ParseError(
                    description=error.get("description"),
                    line=error.get("lineNumber"),
                    column=error.get("column"),
                )
            )

    return ParseResult(
        ast=raw_ast,
        errors=errors,
        source_hash=_hash_source(source),
        source_name=source_name,
    )


__all__ = ["ParseError", "ParseResult", "SOURCE_TYPES", "parse_js"]
