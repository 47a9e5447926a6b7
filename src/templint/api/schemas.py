"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from templint.models.errors import Diagnostic
from templint.settings import CheckPolicy


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    text: str = Field(description="Template source, plain text or RTF")
    document: str = Field(default="<request>", description="Name used in the report")
    rich_text: bool = Field(default=False, description="Extract plain text from RTF first")
    context_padding: int | None = Field(default=None, ge=0)
    check_policy: CheckPolicy | None = None


class AnalyzeResponse(BaseModel):
    """Response body for POST /analyze."""

    document: str
    well_formed: bool
    checked: bool
    ok: bool
    diagnostics: list[Diagnostic] = []
    lines: list[str] = []


class DirectiveInfo(BaseModel):
    """A recognised directive shape."""

    kind: str
    pattern: str


class DirectiveListResponse(BaseModel):
    """Response for GET /directives."""

    directives: list[DirectiveInfo] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
