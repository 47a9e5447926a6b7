"""Structured diagnostics with source offsets and rendered context."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class DiagnosticCode(StrEnum):
    UNMATCHED_CLOSE_BRACE = "UNMATCHED_CLOSE_BRACE"
    UNMATCHED_OPEN_BRACE = "UNMATCHED_OPEN_BRACE"
    UNMATCHED_IF = "UNMATCHED_IF"
    UNMATCHED_END_IF = "UNMATCHED_END_IF"
    ASK_FUNCTION = "ASK_FUNCTION"
    INPUT_COMMAND = "INPUT_COMMAND"


class Severity(StrEnum):
    ERROR = "error"
    ADVISORY = "advisory"


_ADVISORY_CODES = frozenset({DiagnosticCode.ASK_FUNCTION, DiagnosticCode.INPUT_COMMAND})


def severity_for(code: DiagnosticCode) -> Severity:
    """ASK/INPUT are review notices; everything else is a pairing error."""
    return Severity.ADVISORY if code in _ADVISORY_CODES else Severity.ERROR


class SourceSpan(BaseModel):
    """Inclusive character offsets into the analyzed buffer."""

    start: int
    end: int


class ContextWindow(BaseModel):
    """A one-line excerpt of the buffer and a caret line underneath it."""

    context: str
    marker: str

    def lines(self) -> list[str]:
        return [self.context, self.marker]


class Diagnostic(BaseModel):
    """A warning attached to a span: a lead line plus one or more context windows."""

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.ERROR
    spans: list[SourceSpan] = []
    contexts: list[ContextWindow] = []

    def lines(self) -> list[str]:
        out = [self.message]
        for window in self.contexts:
            out.extend(window.lines())
        return out

    def __str__(self) -> str:
        return "\n".join(self.lines())
