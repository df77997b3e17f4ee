"""Indicator-word language guessing.

Responsibilities:
- Score a text sample against fixed function-word lists.
- Pick `pt`, `es`, or `en` with a fixed tie-break order.

Scores count token occurrences, so a repeated function word counts each time
it appears in the sample.
"""

from __future__ import annotations

import re

from .normalizer import coerce_text

DEFAULT_LANGUAGE = "en"
DEFAULT_SAMPLE_SIZE = 100
# Ordered by tie-break priority.
SUPPORTED_LANGUAGES = ("pt", "es", "en")

PORTUGUESE_INDICATORS = frozenset(
    {
        "o",
        "a",
        "os",
        "as",
        "de",
        "que",
        "e",
        "do",
        "da",
        "em",
        "um",
        "para",
        "com",
        "não",
        "uma",
    }
)
ENGLISH_INDICATORS = frozenset(
    {
        "the",
        "be",
        "to",
        "of",
        "and",
        "a",
        "in",
        "that",
        "have",
        "i",
        "it",
        "for",
        "not",
        "on",
        "with",
    }
)
SPANISH_INDICATORS = frozenset(
    {
        "el",
        "la",
        "de",
        "que",
        "y",
        "a",
        "en",
        "un",
        "ser",
        "se",
        "no",
        "haber",
        "por",
        "con",
        "su",
    }
)

_INDICATORS_BY_LANGUAGE = {
    "pt": PORTUGUESE_INDICATORS,
    "en": ENGLISH_INDICATORS,
    "es": SPANISH_INDICATORS,
}
_WHITESPACE_RE = re.compile(r"\s+")


def _sample_tokens(text: str, sample_size: int) -> list[str]:
    """Return the first `sample_size` lower-cased whitespace-split tokens."""

    return _WHITESPACE_RE.split(text.lower())[: max(0, sample_size)]


def score_languages(
    text: str | None, sample_size: int = DEFAULT_SAMPLE_SIZE
) -> dict[str, int]:
    """Count indicator-word occurrences per language in the text sample.

    Args:
        text: Input text.
        sample_size: Maximum number of leading tokens to inspect.

    Returns:
        Mapping of language code to score, in `pt`, `en`, `es` order.
    """

    source = coerce_text(text)
    if not source.strip():
        return {language: 0 for language in _INDICATORS_BY_LANGUAGE}

    tokens = _sample_tokens(source, sample_size)
    return {
        language: sum(1 for token in tokens if token in indicators)
        for language, indicators in _INDICATORS_BY_LANGUAGE.items()
    }


def detect_language(text: str | None, sample_size: int = DEFAULT_SAMPLE_SIZE) -> str:
    """Guess the language code of text.

    Ties at the maximum score resolve to `pt`, then `es`, then `en`. Blank
    text and texts without any indicator word default to `en`.
    """

    scores = score_languages(text, sample_size)
    max_score = max(scores.values())
    if max_score == 0:
        return DEFAULT_LANGUAGE
    return next(language for language in SUPPORTED_LANGUAGES if scores[language] == max_score)
