"""Sentence, paragraph, and word segmentation.

Responsibilities:
- Split normalized text into sentences with a punctuation/capitalization rule.
- Split normalized text into blank-line-delimited paragraphs.
- Count whitespace-delimited words.

Sentence detection is a heuristic: a period followed by whitespace and an
uppercase letter always ends a sentence, so abbreviations such as `Mr.`
produce a split.
"""

from __future__ import annotations

import re

from .normalizer import coerce_text, normalize_text

_SENTENCE_BOUNDARY_RE = re.compile(
    r"(?<=[.!?])\s+(?=[A-Z])"
    r"|(?<=[.!?][\"'])\s+(?=[A-Z])"
    r"|(?<=\n\n)"
)
_PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")
_WHITESPACE_RE = re.compile(r"\s+")


def _non_empty_trimmed(fragments: list[str]) -> list[str]:
    """Trim fragments and drop the ones left empty."""

    trimmed = (fragment.strip() for fragment in fragments)
    return [fragment for fragment in trimmed if fragment]


def segment_into_sentences(text: str | None) -> list[str]:
    """Split text into ordered, trimmed sentences.

    Args:
        text: Raw or normalized text.

    Returns:
        Sentences in source order; empty list for blank input.
    """

    normalized = normalize_text(text)
    if not normalized:
        return []
    return _non_empty_trimmed(_SENTENCE_BOUNDARY_RE.split(normalized))


def segment_into_paragraphs(text: str | None) -> list[str]:
    """Split text into ordered, trimmed paragraphs on blank lines."""

    normalized = normalize_text(text)
    if not normalized:
        return []
    return _non_empty_trimmed(_PARAGRAPH_BREAK_RE.split(normalized))


def count_words(text: str | None) -> int:
    """Return the number of whitespace-delimited tokens in text."""

    stripped = coerce_text(text).strip()
    if not stripped:
        return 0
    return len([word for word in _WHITESPACE_RE.split(stripped) if word])
