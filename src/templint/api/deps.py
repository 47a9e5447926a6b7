"""Dependency injection for FastAPI: TemplateAnalyzer singleton."""

from __future__ import annotations

from templint.service.analyzer import TemplateAnalyzer

_analyzer: TemplateAnalyzer | None = None


def init_analyzer(analyzer: TemplateAnalyzer) -> None:
    """Set the global TemplateAnalyzer (called at app startup)."""
    global _analyzer  # noqa: PLW0603
    _analyzer = analyzer


def get_analyzer() -> TemplateAnalyzer:
    """FastAPI ``Depends`` provider for TemplateAnalyzer."""
    if _analyzer is None:
        raise RuntimeError("TemplateAnalyzer not initialised, call init_analyzer() first")
    return _analyzer


def reset_analyzer() -> None:
    """Clear the global TemplateAnalyzer (for tests)."""
    global _analyzer  # noqa: PLW0603
    _analyzer = None
