"""
Front-end glue: parse JavaScript source and record its scopes.

`run_frontend` parses the source, drives a fresh set of scope visitors over the
AST with the depth-first walker, and optionally caches the parse output. The
returned scopes are the terminal stack of the walk, i.e. the program scope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from analyzer import Scope, create_visitors
from parser import ParseResult, parse_js
from walker import walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontEndResult:
    """Combined output of parsing and scope tracking."""

    parse: ParseResult
    scopes: Optional[List[Scope]]

    @property
    def has_ast(self) -> bool:
        return self.parse.ast is not None

    @property
    def program_scope(self) -> Optional[Scope]:
        if not self.scopes:
            return None
        return self.scopes[0]


def run_frontend(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
    analyze: bool = True,
    source_type: str = "script",
    cache_dir: Optional[Union[str, Path]] = None,
) -> FrontEndResult:
    """
    Parse JavaScript input and track the names declared in each scope.

    Args:
        source: Raw JavaScript source text.
        source_name: Identifier used in diagnostics, e.g. file path.
        tolerant: Forwarded to the parser.
        analyze: Set to False to skip scope tracking.
        source_type: `"script"` or `"module"`.
        cache_dir: Directory to write the parse output to (`None` disables).

    Returns:
        FrontEndResult with the parse output and the terminal scope stack.
    """
    parse_result = parse_js(
        source,
        source_name=source_name,
        tolerant=tolerant,
        source_type=source_type,
    )

    scopes: Optional[List[Scope]] = None
    if analyze and parse_result.ast is not None:
        visitors = create_visitors()
        walk(parse_result.ast, enter=visitors.enter, leave=visitors.exit)
        scopes = visitors.scopes
        logger.debug("%s: %d scope(s) after walk", source_name, len(scopes))

    if cache_dir is not None:
        _persist_parse(cache_dir, parse_result)

    return FrontEndResult(parse=parse_result, scopes=scopes)


def _persist_parse(cache_dir: Union[str, Path], parse_result: ParseResult) -> None:
    path = Path(cache_dir)
    path.mkdir(parents=True, exist_ok=True)
    cache_file = path / f"{parse_result.source_hash}.json"
    cache_file.write_text(parse_result.to_json(), encoding="utf-8")
    logger.debug("cached parse of %s at %s", parse_result.source_name, cache_file)


__all__ = ["FrontEndResult", "run_frontend"]
