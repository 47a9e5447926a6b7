"""RTF extraction that degrades to the raw input on malformed markup."""

from __future__ import annotations

import logging

from striprtf.striprtf import rtf_to_text

logger = logging.getLogger("templint.extract")

_RTF_HEADER = "{\\rtf"


def is_rich_text(raw: str) -> bool:
    return raw.lstrip().startswith(_RTF_HEADER)


def extract_text(raw: str | bytes, encoding: str = "utf-8") -> str:
    """Return the plain text of an RTF document.

    Plain text is returned unchanged.  RTF the converter cannot make sense
    of is also returned unchanged so the caller still gets something to
    check; any other failure propagates.
    """
    if isinstance(raw, bytes):
        raw = raw.decode(encoding, errors="replace")
    if not is_rich_text(raw):
        return raw
    try:
        return rtf_to_text(raw)
    except (ValueError, IndexError, UnicodeError) as exc:
        logger.debug("RTF extraction failed, using raw text: %s", exc)
        return raw
