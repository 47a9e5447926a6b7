"""Per-document and batch analysis results."""

from __future__ import annotations

from pydantic import BaseModel, computed_field

from templint.models.errors import Diagnostic, Severity


class DocumentReport(BaseModel):
    """Outcome of analyzing one document.

    ``error`` is set when the document could not be read or extracted; in
    that case ``diagnostics`` is empty and nothing was checked.
    """

    document: str
    diagnostics: list[Diagnostic] = []
    well_formed: bool = True
    checked: bool = True
    error: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return self.error is None and not self.diagnostics

    def count(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity == severity)

    def lines(self) -> list[str]:
        """Printable warning stream, one string per line."""
        out: list[str] = []
        for diagnostic in self.diagnostics:
            out.extend(diagnostic.lines())
        return out


class BatchReport(BaseModel):
    """Reports for a batch of documents, in input order."""

    documents: list[DocumentReport] = []

    @property
    def failed(self) -> list[DocumentReport]:
        return [d for d in self.documents if d.error is not None]

    @property
    def diagnostic_count(self) -> int:
        return sum(len(d.diagnostics) for d in self.documents)
