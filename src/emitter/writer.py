"""
Render the scopes recorded by the front end as text or JSON.
"""

from __future__ import annotations

import io
import json
from dataclasses import dataclass
from typing import Any, Dict

from frontend import FrontEndResult

FORMATS = ("text", "json")


@dataclass(frozen=True)
class EmitOptions:
    format: str = "text"
    trailing_newline: bool = True


def _report_payload(result: FrontEndResult) -> Dict[str, Any]:
    return {
        "source_name": result.parse.source_name,
        "scopes": [
            {"block": scope.block, "defined": list(scope.defined)}
            for scope in result.scopes or []
        ],
        "errors": [error.__dict__ for error in result.parse.errors],
    }


def emit_report(result: FrontEndResult, options: EmitOptions | None = None) -> str:
    """
    Render `result` according to `options`.

    Text output has one line per scope, e.g. `function: a, b`.
    """
    options = options or EmitOptions()
    if options.format not in FORMATS:
        raise ValueError(f"format must be one of {FORMATS}, got {options.format!r}")

    buffer = io.StringIO()
    if options.format == "json":
        buffer.write(json.dumps(_report_payload(result), ensure_ascii=False, indent=2))
    else:
        lines = []
        for scope in result.scopes or []:
            label = "block" if scope.block else "function"
            lines.append(f"{label}: {', '.join(scope.defined)}".rstrip())
        buffer.write("\n".join(lines))

    if options.trailing_newline:
        buffer.write("\n")
    return buffer.getvalue()


__all__ = ["EmitOptions", "FORMATS", "emit_report"]
