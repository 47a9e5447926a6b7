"""FastMCP server exposing templint's checks as MCP tools.

Run via::

    templint-mcp                                 # reads .env (default: stdio)
    TEMPLINT_MCP_TRANSPORT=http templint-mcp     # streamable HTTP on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from templint import __version__
from templint.checker.directives import DIRECTIVE_PATTERNS, advisories, classify
from templint.extract.rtf import extract_text
from templint.service.analyzer import TemplateAnalyzer
from templint.settings import CheckPolicy, Settings

logger = logging.getLogger("templint.mcp")

mcp = FastMCP("templint")
_analyzer: TemplateAnalyzer | None = None


def _get_analyzer() -> TemplateAnalyzer:
    global _analyzer  # noqa: PLW0603
    if _analyzer is None:
        _analyzer = TemplateAnalyzer()
    return _analyzer


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

DIRECTIVE_REFERENCE = """\
# Template directives checked by templint

Directives are brace-delimited spans.  Keywords are case-insensitive.

| kind   | shape                       | check                                |
|--------|-----------------------------|--------------------------------------|
| IF     | `{IF <condition>}`          | must be closed by an END IF sibling  |
| END_IF | `{END IF}`                  | must close an earlier IF sibling     |
| ASK    | `{... ASK(<prompt>) ...}`   | advisory: prompts the user at merge  |
| INPUT  | `{INPUT <field>}`           | advisory: prompts the user at merge  |

IF / END IF pairs are balanced among the direct children of one span only:
an IF inside `{...}` cannot be closed by an END IF outside it.

Every `{` needs a matching `}`.  Unbalanced braces are reported at the
offending character.
"""


@mcp.resource("templint://directives")
def directive_reference() -> str:
    """Reference of the directive shapes and the checks applied to them."""
    return DIRECTIVE_REFERENCE


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def analyze_template(
    text: str,
    document: str = "<mcp>",
    rich_text: bool = False,
    context_padding: int | None = None,
    check_policy: str | None = None,
) -> str:
    """Check a mail-merge template for brace and directive problems.

    Returns each warning with a one-line excerpt and a caret line under
    the offending span, or a short confirmation when nothing was found.

    Args:
        text: Template source (plain text, or RTF with ``rich_text=True``).
        document: Name used in the report.
        rich_text: Extract plain text from RTF before checking.
        context_padding: Characters of surrounding text to show each side.
        check_policy: ``tolerant`` (default) or ``gated`` (skip directive
            checks when braces are unbalanced).
    """
    logger.info("analyze_template called (text length=%d)", len(text))
    if context_padding is not None and context_padding < 0:
        raise ToolError("context_padding must be >= 0")
    policy: CheckPolicy | None = None
    if check_policy is not None:
        try:
            policy = CheckPolicy(check_policy.lower())
        except ValueError as exc:
            choices = ", ".join(p.value for p in CheckPolicy)
            raise ToolError(f"Unknown check_policy '{check_policy}' (use {choices})") from exc

    source = extract_text(text) if rich_text else text
    report = _get_analyzer().analyze_text(
        source, document, context_padding=context_padding, check_policy=policy
    )
    if report.ok:
        return f"{document}: no problems found."

    lines = [f"{document}: {len(report.diagnostics)} warning(s)"]
    if not report.checked:
        lines.append("Directive checks skipped: braces are unbalanced.")
    for diagnostic in report.diagnostics:
        lines.append(f"[{diagnostic.code}]")
        lines.extend(diagnostic.lines())
    return "\n".join(lines)


@mcp.tool
def classify_directive(span: str) -> str:
    """Classify a single ``{...}`` span (braces included) as IF, END_IF, ASK, INPUT or OTHER."""
    span = span.strip()
    if not (span.startswith("{") and span.endswith("}")):
        raise ToolError("span must start with '{' and end with '}'")
    kind = classify(span)
    flags = [k.value for k in advisories(span) if k != kind]
    if flags:
        return f"{kind.value} (also {', '.join(flags)})"
    return kind.value


@mcp.tool
def list_directives() -> str:
    """List the directive patterns in the order they are matched."""
    return "\n".join(f"{kind.value}: {pattern.pattern}" for kind, pattern in DIRECTIVE_PATTERNS)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "templint MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _analyzer  # noqa: PLW0603
    _analyzer = TemplateAnalyzer(settings)

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
