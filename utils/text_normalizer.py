"""Whitespace normalization and length limits for extracted text.

Display fields (site name, title, description, thumbnail) end up in
fixed-width columns, so they are collapsed and hard-cut. The body excerpt is
only collapsed; its length is bounded by the extractor itself.
"""

from __future__ import annotations

import re
from typing import Optional

DISPLAY_FIELD_LIMIT = 255

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse every whitespace run to a single space and trim.

    >>> normalize_whitespace("a\\n\\n  b")
    'a b'
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate_display(text: Optional[str], limit: int = DISPLAY_FIELD_LIMIT) -> str:
    """Normalize whitespace, then cut at ``limit`` characters.

    The cut is a hard cut; a word straddling the limit is split.
    """
    return normalize_whitespace(text)[:limit]
