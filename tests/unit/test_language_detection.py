"""Unit tests for indicator-word language detection."""

from __future__ import annotations

import pytest

from clipimport.text.language import (
    ENGLISH_INDICATORS,
    PORTUGUESE_INDICATORS,
    SPANISH_INDICATORS,
    SUPPORTED_LANGUAGES,
    detect_language,
    score_languages,
)


def test_detect_language_defaults_to_english_for_blank_input() -> None:
    """Blank and missing text should default to English."""

    assert detect_language("") == "en"
    assert detect_language("   \n") == "en"
    assert detect_language(None) == "en"


def test_detect_language_defaults_to_english_without_indicators() -> None:
    """Text without any indicator word should default to English."""

    assert detect_language("Lorem ipsum dolor sit amet") == "en"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("o a de que e", "pt"),
        ("Eu não sei o que fazer com isso", "pt"),
        ("The cat and the dog sat on the mat", "en"),
        ("THE AND OF", "en"),
        ("El perro y la casa", "es"),
    ],
)
def test_detect_language_picks_highest_score(text: str, expected: str) -> None:
    """The language with the most indicator hits should win."""

    assert detect_language(text) == expected


def test_detect_language_breaks_ties_portuguese_then_spanish() -> None:
    """Ties at the maximum prefer `pt`, then `es`, then `en`."""

    assert score_languages("de que") == {"pt": 2, "en": 0, "es": 2}
    assert detect_language("de que") == "pt"
    assert detect_language("el the") == "es"
    assert detect_language("a") == "pt"


def test_detect_language_counts_repeated_indicator_occurrences() -> None:
    """Repeated function words count on every occurrence."""

    text = "the the the el la"

    assert score_languages(text) == {"pt": 0, "en": 3, "es": 2}
    assert detect_language(text) == "en"


def test_detect_language_inspects_only_leading_sample() -> None:
    """Only the leading token sample should be scored."""

    text = "zzz " * 100 + "o a de que"

    assert detect_language(text) == "en"
    assert detect_language(text, sample_size=200) == "pt"


def test_indicator_sets_are_immutable() -> None:
    """Indicator tables should be fixed fifteen-word frozensets."""

    for indicators in (PORTUGUESE_INDICATORS, ENGLISH_INDICATORS, SPANISH_INDICATORS):
        assert isinstance(indicators, frozenset)
        assert len(indicators) == 15


@pytest.mark.parametrize(
    "text",
    ["", "zzz", "o a de", "the and of", "el la y", "de que the", "MIXED de the el o"],
)
def test_detect_language_returns_supported_code(text: str) -> None:
    """Detection should only ever return one of the supported language codes."""

    assert detect_language(text) in SUPPORTED_LANGUAGES
    assert set(score_languages(text)) == set(SUPPORTED_LANGUAGES)
