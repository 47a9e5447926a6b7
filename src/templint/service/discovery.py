"""Locate template documents on disk."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class DocumentNotFoundError(FileNotFoundError):
    """Raised when an analysis target does not exist."""


def _normalise(extensions: Iterable[str]) -> set[str]:
    return {e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions}


def discover(
    target: str | Path, extensions: Iterable[str], *, recursive: bool = False
) -> list[Path]:
    """Return the documents to analyze for ``target``.

    A file is returned as-is regardless of its extension.  A directory
    yields its files whose suffix matches ``extensions`` (case-insensitive),
    sorted by path.
    """
    root = Path(target)
    if root.is_file():
        return [root]
    if not root.is_dir():
        raise DocumentNotFoundError(f"No such file or directory: '{root}'")

    wanted = _normalise(extensions)
    candidates = root.rglob("*") if recursive else root.glob("*")
    return sorted(p for p in candidates if p.is_file() and p.suffix.lower() in wanted)
