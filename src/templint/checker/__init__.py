"""Directive classification and IF / END IF pairing checks."""

from templint.checker.checker import DirectiveChecker, check
from templint.checker.directives import DirectiveKind, advisories, classify, classify_span

__all__ = [
    "DirectiveChecker",
    "DirectiveKind",
    "advisories",
    "check",
    "classify",
    "classify_span",
]
