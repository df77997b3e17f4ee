"""Whitespace and line-ending normalization for imported text.

Responsibilities:
- Canonicalize pasted text before any segmentation or analysis.
- Keep normalization idempotent so every stage may re-apply it safely.
"""

from __future__ import annotations

import re

_TRAILING_LINE_WHITESPACE_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)
_EXCESS_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TAB_EXPANSION = "  "


def coerce_text(text: object) -> str:
    """Return `text` as a string, mapping `None` to an empty string."""

    if text is None:
        return ""
    if isinstance(text, str):
        return text
    return str(text)


def normalize_text(text: str | None) -> str:
    """Normalize raw text into canonical internal representation.

    Steps are applied in order to the whole string: CRLF to LF, tabs to two
    spaces, non-breaking spaces to spaces, trailing whitespace removed from
    every line, runs of three or more newlines collapsed to one blank line,
    and finally the whole result trimmed.

    Args:
        text: Raw input text. `None` is treated as empty.

    Returns:
        Normalized text, or an empty string for blank input.
    """

    normalized = coerce_text(text)
    if not normalized.strip():
        return ""

    normalized = normalized.replace("\r\n", "\n")
    normalized = normalized.replace("\t", _TAB_EXPANSION)
    normalized = normalized.replace("\u00a0", " ")
    normalized = _TRAILING_LINE_WHITESPACE_RE.sub("", normalized)
    normalized = _EXCESS_BLANK_LINES_RE.sub("\n\n", normalized)
    return normalized.strip()


class TextNormalizer:
    """Normalize imported text into canonical internal representation."""

    def normalize(self, text: str | None) -> str:
        """Normalize text for downstream deterministic processing."""

        return normalize_text(text)
