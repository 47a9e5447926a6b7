"""Pydantic diagnostic and report models for templint."""

from templint.models.errors import (
    ContextWindow,
    Diagnostic,
    DiagnosticCode,
    Severity,
    SourceSpan,
)
from templint.models.report import BatchReport, DocumentReport

__all__ = [
    "BatchReport",
    "ContextWindow",
    "Diagnostic",
    "DiagnosticCode",
    "DocumentReport",
    "Severity",
    "SourceSpan",
]
