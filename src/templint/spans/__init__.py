"""Brace span tree: node type, one-pass builder and context rendering."""

from templint.spans.builder import build
from templint.spans.context import render_context
from templint.spans.nodes import Span

__all__ = [
    "Span",
    "build",
    "render_context",
]
