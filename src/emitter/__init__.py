"""Rendering of scope reports."""

from .writer import FORMATS, EmitOptions, emit_report

__all__ = ["EmitOptions", "FORMATS", "emit_report"]
