"""One-pass builder turning template text into a tree of brace spans."""

from __future__ import annotations

from templint.models.errors import Diagnostic, DiagnosticCode, SourceSpan, severity_for
from templint.spans.context import DEFAULT_CONTEXT_PADDING, render_context
from templint.spans.nodes import Span

EXTRA_CLOSE_MESSAGE = "Extra '}' found as following:"
EXTRA_OPEN_MESSAGE = "Extra '{' found as following:"


def structural_warning(
    code: DiagnosticCode, message: str, text: str, position: int, padding: int
) -> Diagnostic:
    """A brace-balance warning anchored at a single character."""
    return Diagnostic(
        code=code,
        message=message,
        severity=severity_for(code),
        spans=[SourceSpan(start=position, end=position)],
        contexts=[render_context(text, position, position, padding)],
    )


def build(
    text: str, context_padding: int = DEFAULT_CONTEXT_PADDING
) -> tuple[Span, list[Diagnostic]]:
    """Scan ``text`` once and return the root span plus structural warnings.

    Never raises on unbalanced input: a ``}`` with nothing open is reported
    and skipped, and every ``{`` still open at the end is reported at its
    own position, innermost first.  The warnings are also appended to
    ``root.warnings``.
    """
    root = Span.root(text)
    stack: list[Span] = [root]
    warnings: list[Diagnostic] = []

    for i, char in enumerate(text):
        if char == "{":
            stack.append(stack[-1].open_child(i))
        elif char == "}":
            if len(stack) < 2:
                root.mark_malformed()
                warnings.append(
                    structural_warning(
                        DiagnosticCode.UNMATCHED_CLOSE_BRACE,
                        EXTRA_CLOSE_MESSAGE,
                        text,
                        i,
                        context_padding,
                    )
                )
                continue
            stack.pop().end = i

    for span in reversed(stack[1:]):
        span.mark_malformed()
        warnings.append(
            structural_warning(
                DiagnosticCode.UNMATCHED_OPEN_BRACE,
                EXTRA_OPEN_MESSAGE,
                text,
                span.start,
                context_padding,
            )
        )

    root.warnings.extend(warnings)
    return root, warnings
