"""Rich-text to plain-text extraction."""

from templint.extract.rtf import extract_text, is_rich_text

__all__ = ["extract_text", "is_rich_text"]
