"""IF / END IF pairing and ASK / INPUT advisories over a span tree.

Pairing is checked per scope: the direct children of one span are balanced
against each other only.  An IF in one subtree and an END IF in a sibling
subtree are each reported in their own scope.
"""

from __future__ import annotations

from templint.checker.directives import DirectiveKind, advisories, classify
from templint.models.errors import Diagnostic, DiagnosticCode, SourceSpan, severity_for
from templint.spans.context import DEFAULT_CONTEXT_PADDING, render_context
from templint.spans.nodes import Span

ASK_MESSAGE = "'ASK' function is found as following"
INPUT_MESSAGE = "'INPUT' command is found as following"
EXTRA_END_IF_MESSAGE = "Extra 'End If' command is found as following"
EXTRA_IF_MESSAGE = "Extra 'If' command is found as following"

_ADVISORY = {
    DirectiveKind.ASK: (DiagnosticCode.ASK_FUNCTION, ASK_MESSAGE),
    DirectiveKind.INPUT: (DiagnosticCode.INPUT_COMMAND, INPUT_MESSAGE),
}


class DirectiveChecker:
    """Attaches directive warnings to the parent of each offending span.

    Warnings are appended on every call; checking the same tree twice
    reports everything twice.
    """

    def __init__(self, context_padding: int = DEFAULT_CONTEXT_PADDING) -> None:
        self._padding = context_padding

    def check(self, node: Span) -> None:
        """Check every scope under ``node``, deepest scopes first.

        Walks an explicit stack so nesting depth is bounded by memory only.
        """
        pending = [node]
        scopes: list[Span] = []
        while pending:
            span = pending.pop()
            if span.children:
                scopes.append(span)
                pending.extend(reversed(span.children))
        for scope in reversed(scopes):
            self._check_scope(scope)

    def _check_scope(self, node: Span) -> None:
        """Pair IF / END IF among the direct children of ``node``."""
        open_ifs: list[Span] = []
        for child in node.children:
            source = child.source
            if source is None:
                continue

            for kind in advisories(source):
                code, message = _ADVISORY[kind]
                node.warnings.append(self._diagnostic(code, message, [child]))

            kind = classify(source)
            if kind is DirectiveKind.IF:
                open_ifs.append(child)
            elif kind is DirectiveKind.END_IF:
                if not open_ifs:
                    node.warnings.append(
                        self._diagnostic(
                            DiagnosticCode.UNMATCHED_END_IF, EXTRA_END_IF_MESSAGE, [child]
                        )
                    )
                    continue
                open_ifs.pop()

        if open_ifs:
            node.warnings.append(
                self._diagnostic(
                    DiagnosticCode.UNMATCHED_IF, EXTRA_IF_MESSAGE, list(reversed(open_ifs))
                )
            )

    def _diagnostic(
        self, code: DiagnosticCode, message: str, spans: list[Span]
    ) -> Diagnostic:
        anchors = [SourceSpan(start=s.start, end=s.end) for s in spans if s.end is not None]
        return Diagnostic(
            code=code,
            message=message,
            severity=severity_for(code),
            spans=anchors,
            contexts=[
                render_context(s.text, a.start, a.end, self._padding)
                for s, a in zip(spans, anchors, strict=True)
            ],
        )


def check(node: Span, context_padding: int = DEFAULT_CONTEXT_PADDING) -> None:
    """Run :class:`DirectiveChecker` over ``node`` and its descendants."""
    DirectiveChecker(context_padding).check(node)
