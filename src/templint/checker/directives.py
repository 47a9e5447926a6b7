"""Classify a span's literal text into a directive kind."""

from __future__ import annotations

import re
from enum import StrEnum

from templint.spans.nodes import Span


class DirectiveKind(StrEnum):
    IF = "IF"
    END_IF = "END_IF"
    ASK = "ASK"
    INPUT = "INPUT"
    OTHER = "OTHER"


# Whole-span patterns; ``.`` deliberately does not cross line breaks.
_IF_RE = re.compile(r"\{\s*if\s+.*?\}", re.IGNORECASE)
_END_IF_RE = re.compile(r"\{\s*end\s+if\s*?\}", re.IGNORECASE)
_ASK_RE = re.compile(r"\{.*?ask\s*\(.*?\).*?\}", re.IGNORECASE)
_INPUT_RE = re.compile(r"\{\s*input\s+.*?\}", re.IGNORECASE)

DIRECTIVE_PATTERNS: tuple[tuple[DirectiveKind, re.Pattern[str]], ...] = (
    (DirectiveKind.IF, _IF_RE),
    (DirectiveKind.END_IF, _END_IF_RE),
    (DirectiveKind.ASK, _ASK_RE),
    (DirectiveKind.INPUT, _INPUT_RE),
)


def classify(source: str) -> DirectiveKind:
    """Return the first directive kind whose pattern matches the whole of ``source``."""
    if _IF_RE.fullmatch(source):
        return DirectiveKind.IF
    if _END_IF_RE.fullmatch(source):
        return DirectiveKind.END_IF
    if _ASK_RE.fullmatch(source):
        return DirectiveKind.ASK
    if _INPUT_RE.fullmatch(source):
        return DirectiveKind.INPUT
    return DirectiveKind.OTHER


def advisories(source: str) -> tuple[DirectiveKind, ...]:
    """ASK / INPUT flags for ``source``, independent of its structural kind.

    ``{IF ask(x) = 1}`` is an IF for pairing purposes and still gets an ASK
    advisory.
    """
    found: list[DirectiveKind] = []
    if _ASK_RE.fullmatch(source):
        found.append(DirectiveKind.ASK)
    if _INPUT_RE.fullmatch(source):
        found.append(DirectiveKind.INPUT)
    return tuple(found)


def classify_span(span: Span) -> DirectiveKind:
    """Classify a span; the root and unmatched spans are always ``OTHER``."""
    source = span.source
    if source is None:
        return DirectiveKind.OTHER
    return classify(source)
