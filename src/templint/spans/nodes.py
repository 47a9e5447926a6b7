"""Span tree nodes: one node per ``{...}`` region plus an implicit root."""

from __future__ import annotations

import weakref
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from templint.models.errors import Diagnostic

ROOT_START = -1


@dataclass(eq=False)
class Span:
    """A brace-delimited region of ``text``.

    ``start`` is the index of ``{`` (``-1`` for the root) and ``end`` the
    index of the matching ``}`` (``len(text)`` for the root).  ``end`` stays
    ``None`` for a ``{`` that never found its ``}``.  All spans of one
    document share the same ``text`` object.
    """

    text: str = field(repr=False)
    start: int
    end: int | None = None
    children: list[Span] = field(default_factory=list, repr=False)
    warnings: list[Diagnostic] = field(default_factory=list, repr=False)
    _parent: weakref.ReferenceType[Span] | None = field(default=None, repr=False)
    _malformed: bool = field(default=False, repr=False)

    @classmethod
    def root(cls, text: str) -> Span:
        return cls(text=text, start=ROOT_START, end=len(text))

    def open_child(self, start: int) -> Span:
        """Create a span opened at ``start`` and append it to ``children``."""
        child = Span(text=self.text, start=start, _parent=weakref.ref(self))
        self.children.append(child)
        return child

    @property
    def parent(self) -> Span | None:
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_matched(self) -> bool:
        return self.end is not None

    def mark_malformed(self) -> None:
        self._malformed = True

    @property
    def is_well_formed(self) -> bool:
        return all(not span._malformed for span in self.walk())

    @property
    def source(self) -> str | None:
        """Literal text of the span, braces included; ``None`` for the root or unmatched spans."""
        if self.is_root or self.end is None:
            return None
        return self.text[self.start : self.end + 1]

    def walk(self) -> Iterator[Span]:
        """Breadth-first iteration over this span and all descendants."""
        queue: deque[Span] = deque([self])
        while queue:
            current = queue.popleft()
            queue.extend(current.children)
            yield current

    def __iter__(self) -> Iterator[Span]:
        return self.walk()

    def height(self) -> int:
        """Levels in this subtree, counting a leaf as 1."""
        deepest = 0
        queue: deque[tuple[Span, int]] = deque([(self, 1)])
        while queue:
            span, depth = queue.popleft()
            deepest = max(deepest, depth)
            queue.extend((child, depth + 1) for child in span.children)
        return deepest

    def leaves(self) -> list[Span]:
        return [span for span in self.walk() if not span.children]

    def all_warnings(self) -> list[Diagnostic]:
        return [w for span in self.walk() for w in span.warnings]

    def __str__(self) -> str:
        if self.is_root:
            return self.text
        if self.end is None:
            return self.text[self.start :]
        return self.text[self.start : self.end + 1]
