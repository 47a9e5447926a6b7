"""Template analysis endpoint: POST /analyze."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from templint.api.deps import get_analyzer
from templint.api.schemas import AnalyzeRequest, AnalyzeResponse
from templint.extract.rtf import extract_text
from templint.service.analyzer import TemplateAnalyzer

router = APIRouter()


@router.post("", response_model=AnalyzeResponse)
async def analyze(
    body: AnalyzeRequest,
    analyzer: TemplateAnalyzer = Depends(get_analyzer),  # noqa: B008
) -> AnalyzeResponse:
    """Check one template for brace, IF/END IF, ASK and INPUT problems."""
    text = extract_text(body.text) if body.rich_text else body.text
    report = analyzer.analyze_text(
        text,
        body.document,
        context_padding=body.context_padding,
        check_policy=body.check_policy,
    )
    return AnalyzeResponse(
        document=report.document,
        well_formed=report.well_formed,
        checked=report.checked,
        ok=report.ok,
        diagnostics=report.diagnostics,
        lines=report.lines(),
    )
