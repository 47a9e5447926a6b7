"""Per-document analysis pipeline: text → span tree → directive checks → report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from templint.checker.checker import DirectiveChecker
from templint.extract.rtf import extract_text
from templint.models.report import BatchReport, DocumentReport
from templint.settings import CheckPolicy, Settings
from templint.spans.builder import build
from templint.spans.nodes import Span

logger = logging.getLogger("templint.service")


@dataclass
class Analysis:
    """The checked span tree together with its report."""

    root: Span
    report: DocumentReport


class TemplateAnalyzer:
    """Runs build and check over documents.  Each document is independent.

    The analyzer holds no per-document state, so one instance can serve
    concurrent callers.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def analyze(
        self,
        text: str,
        document: str = "<string>",
        *,
        context_padding: int | None = None,
        check_policy: CheckPolicy | None = None,
    ) -> Analysis:
        """Build and check ``text``, returning the tree and the flattened report."""
        padding = self._settings.context_padding if context_padding is None else context_padding
        policy = self._settings.check_policy if check_policy is None else check_policy

        root, structural = build(text, padding)
        well_formed = root.is_well_formed
        checked = policy == CheckPolicy.TOLERANT or well_formed
        if checked:
            DirectiveChecker(padding).check(root)
        else:
            logger.info(
                "Skipping directive checks for %s: %d brace problem(s)",
                document,
                len(structural),
            )

        report = DocumentReport(
            document=document,
            diagnostics=root.all_warnings(),
            well_formed=well_formed,
            checked=checked,
        )
        logger.debug("Analyzed %s: %d diagnostic(s)", document, len(report.diagnostics))
        return Analysis(root=root, report=report)

    def analyze_text(
        self,
        text: str,
        document: str = "<string>",
        *,
        context_padding: int | None = None,
        check_policy: CheckPolicy | None = None,
    ) -> DocumentReport:
        return self.analyze(
            text, document, context_padding=context_padding, check_policy=check_policy
        ).report

    def read(self, path: Path) -> str:
        """Read a document, extracting plain text from rich text when enabled."""
        raw = path.read_bytes()
        if self._settings.extract_rich_text:
            return extract_text(raw, self._settings.encoding)
        return raw.decode(self._settings.encoding, errors="replace")

    def analyze_file(self, path: Path) -> DocumentReport:
        return self.analyze_text(self.read(path), str(path))

    def _analyze_isolated(self, path: Path) -> DocumentReport:
        try:
            return self.analyze_file(path)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to analyze %s: %s", path, exc)
            return DocumentReport(document=str(path), checked=False, error=str(exc))

    def analyze_paths(self, paths: Sequence[Path]) -> BatchReport:
        """Analyze every path; a failure in one document never stops the rest."""
        logger.info("Analyzing %d document(s)", len(paths))
        workers = min(self._settings.workers, max(len(paths), 1))
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                reports = list(pool.map(self._analyze_isolated, paths))
        else:
            reports = [self._analyze_isolated(p) for p in paths]
        return BatchReport(documents=reports)
