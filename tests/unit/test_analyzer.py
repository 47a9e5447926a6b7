"""Tests for the document analyzer, discovery and batch isolation."""

from __future__ import annotations

from pathlib import Path

import pytest

from templint.models.errors import DiagnosticCode, Severity
from templint.service.analyzer import TemplateAnalyzer
from templint.service.discovery import DocumentNotFoundError, discover
from templint.settings import CheckPolicy, Settings
from tests.conftest import BROKEN_TEMPLATE, SAMPLE_TEMPLATE


class TestAnalyzeText:
    def test_sample_template_has_only_advisories(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text(SAMPLE_TEMPLATE, "letter")
        assert report.document == "letter"
        assert report.well_formed
        assert report.checked
        assert [d.code for d in report.diagnostics] == [
            DiagnosticCode.ASK_FUNCTION,
            DiagnosticCode.INPUT_COMMAND,
        ]
        assert report.count(Severity.ADVISORY) == 2
        assert report.count(Severity.ERROR) == 0
        assert not report.ok

    def test_clean_template_is_ok(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text("Dear {Name}, {IF a}x{END IF}")
        assert report.ok
        assert report.lines() == []

    def test_tolerant_checks_broken_template(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text(BROKEN_TEMPLATE)
        assert not report.well_formed
        assert report.checked
        assert [d.code for d in report.diagnostics] == [
            DiagnosticCode.UNMATCHED_CLOSE_BRACE,
            DiagnosticCode.UNMATCHED_OPEN_BRACE,
            DiagnosticCode.UNMATCHED_IF,
        ]
        assert [(s.start, s.end) for s in report.diagnostics[2].spans] == [(27, 35)]

    def test_gated_skips_checks_on_broken_template(self) -> None:
        analyzer = TemplateAnalyzer(Settings(check_policy=CheckPolicy.GATED))
        report = analyzer.analyze_text(BROKEN_TEMPLATE)
        assert not report.checked
        assert [d.code for d in report.diagnostics] == [
            DiagnosticCode.UNMATCHED_CLOSE_BRACE,
            DiagnosticCode.UNMATCHED_OPEN_BRACE,
        ]

    def test_gated_checks_well_formed_template(self) -> None:
        analyzer = TemplateAnalyzer(Settings(check_policy=CheckPolicy.GATED))
        report = analyzer.analyze_text("{IF a}")
        assert report.checked
        assert [d.code for d in report.diagnostics] == [DiagnosticCode.UNMATCHED_IF]

    def test_per_call_overrides(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text(
            "abc{END IF}def", context_padding=0, check_policy=CheckPolicy.GATED
        )
        assert report.lines() == [
            "Extra 'End If' command is found as following",
            "{END IF}",
            "^^^^^^^^",
        ]

    def test_analyze_returns_tree(self, analyzer: TemplateAnalyzer) -> None:
        analysis = analyzer.analyze("{IF a}{x}")
        assert len(analysis.root.children) == 2
        assert analysis.report.diagnostics == analysis.root.all_warnings()

    def test_documents_are_independent(self, analyzer: TemplateAnalyzer) -> None:
        first = analyzer.analyze_text("{IF a}")
        second = analyzer.analyze_text("{a}")
        assert len(first.diagnostics) == 1
        assert second.ok


class TestDiscover:
    def test_directory_filters_extensions(self, template_dir: Path) -> None:
        found = discover(template_dir, [".rtf"])
        assert [p.name for p in found] == ["letter.rtf", "memo.RTF"]

    def test_extension_without_dot(self, template_dir: Path) -> None:
        found = discover(template_dir, ["txt"])
        assert [p.name for p in found] == ["notes.txt"]

    def test_recursive(self, template_dir: Path) -> None:
        found = discover(template_dir, [".rtf"], recursive=True)
        assert [p.name for p in found] == ["old.rtf", "letter.rtf", "memo.RTF"]

    def test_single_file_any_extension(self, template_dir: Path) -> None:
        target = template_dir / "notes.txt"
        assert discover(target, [".rtf"]) == [target]

    def test_missing_target(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError):
            discover(tmp_path / "nope", [".rtf"])


class TestAnalyzePaths:
    def test_reports_in_input_order(self, analyzer: TemplateAnalyzer, template_dir: Path) -> None:
        paths = discover(template_dir, [".rtf"])
        batch = analyzer.analyze_paths(paths)
        assert [Path(r.document).name for r in batch.documents] == ["letter.rtf", "memo.RTF"]
        assert batch.documents[0].ok
        assert [d.code for d in batch.documents[1].diagnostics] == [DiagnosticCode.UNMATCHED_IF]
        assert batch.diagnostic_count == 1
        assert batch.failed == []

    def test_thread_pool(self, template_dir: Path) -> None:
        analyzer = TemplateAnalyzer(Settings(workers=4))
        paths = discover(template_dir, [".rtf"], recursive=True)
        batch = analyzer.analyze_paths(paths)
        assert [Path(r.document).name for r in batch.documents] == [p.name for p in paths]
        assert batch.diagnostic_count == 2

    def test_failure_is_isolated(
        self, analyzer: TemplateAnalyzer, template_dir: Path
    ) -> None:
        paths = [template_dir / "missing.rtf", template_dir / "memo.RTF"]
        batch = analyzer.analyze_paths(paths)
        failed, ok = batch.documents
        assert failed.error is not None
        assert not failed.checked
        assert ok.error is None
        assert batch.failed == [failed]

    def test_extraction_error_is_isolated(
        self,
        analyzer: TemplateAnalyzer,
        template_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def _boom(raw: str | bytes, encoding: str = "utf-8") -> str:
            raise RuntimeError("converter crashed")

        monkeypatch.setattr("templint.service.analyzer.extract_text", _boom)
        batch = analyzer.analyze_paths(discover(template_dir, [".rtf"]))
        assert [r.error for r in batch.documents] == ["converter crashed"] * 2

    def test_rich_text_is_extracted(self, analyzer: TemplateAnalyzer, tmp_path: Path) -> None:
        path = tmp_path / "doc.rtf"
        path.write_text(r"{\rtf1\ansi \{IF a\}hello\par}", encoding="utf-8")
        report = analyzer.analyze_file(path)
        assert [d.code for d in report.diagnostics] == [DiagnosticCode.UNMATCHED_IF]

    def test_extraction_can_be_disabled(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.rtf"
        path.write_text(r"{\rtf1\ansi \{IF a\}hello\par}", encoding="utf-8")
        analyzer = TemplateAnalyzer(Settings(extract_rich_text=False))
        assert analyzer.read(path) == r"{\rtf1\ansi \{IF a\}hello\par}"


class TestDeepInput:
    def test_balanced_deep_nesting(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text("{" * 1500 + "}" * 1500)
        assert report.ok
        assert report.well_formed

    def test_stray_opens_become_diagnostics(self, analyzer: TemplateAnalyzer) -> None:
        report = analyzer.analyze_text("{" * 2000)
        assert report.error is None
        assert [d.code for d in report.diagnostics] == [DiagnosticCode.UNMATCHED_OPEN_BRACE] * 2000
