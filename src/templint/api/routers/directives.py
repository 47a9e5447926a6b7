"""Directive listing endpoint: GET /directives."""

from __future__ import annotations

from fastapi import APIRouter

from templint.api.schemas import DirectiveInfo, DirectiveListResponse
from templint.checker.directives import DIRECTIVE_PATTERNS

router = APIRouter()


@router.get("", response_model=DirectiveListResponse)
async def list_directives() -> DirectiveListResponse:
    """List the directive shapes the checker recognises, in match order."""
    return DirectiveListResponse(
        directives=[
            DirectiveInfo(kind=kind.value, pattern=pattern.pattern)
            for kind, pattern in DIRECTIVE_PATTERNS
        ]
    )
