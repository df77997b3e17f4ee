"""Unit tests for YAML/environment setting readers."""

from __future__ import annotations

import pytest

from clipimport.parsing import parse_count, parse_toggle, setting_text


def test_setting_text_treats_unset_and_blank_settings_as_missing() -> None:
    """Blank environment strings and YAML nulls should read as unset."""

    assert setting_text(None) is None
    assert setting_text("") is None
    assert setting_text("   ") is None


def test_setting_text_strips_yaml_scalars_and_env_strings() -> None:
    """Scalars of any type should come back as stripped text."""

    assert setting_text(" json ") == "json"
    assert setting_text(250) == "250"
    assert setting_text(False) == "False"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, True),
        (False, False),
        (" YES ", True),
        ("On", True),
        ("enabled", True),
        ("1", True),
        ("false", False),
        ("Off", False),
        ("disabled", False),
        ("0", False),
    ],
)
def test_parse_toggle_reads_use_sample_content_tokens(raw: object, expected: bool) -> None:
    """The sample-content switch should accept YAML booleans and env on/off words."""

    assert parse_toggle(raw, "use_sample_content") is expected


@pytest.mark.parametrize("raw", ["maybe", "", "2", None])
def test_parse_toggle_rejects_unknown_tokens_with_setting_label(raw: object) -> None:
    """Errors should name the env variable the user set."""

    with pytest.raises(ValueError, match="`CLIPIMPORT_USE_SAMPLE_CONTENT` must be on or off"):
        parse_toggle(raw, "CLIPIMPORT_USE_SAMPLE_CONTENT")


@pytest.mark.parametrize(("raw", "expected"), [(200, 200), (" 50 ", 50), ("+7", 7)])
def test_parse_count_reads_language_sample_size(raw: object, expected: int) -> None:
    """Sample sizes should accept YAML ints and numeric env strings."""

    assert parse_count(raw, "language_sample_size") == expected


@pytest.mark.parametrize("raw", [0, "0", -5, "x", "2.5", 2.5, True, "--3", None])
def test_parse_count_rejects_non_positive_sample_sizes(raw: object) -> None:
    """A language sample must hold at least one token."""

    with pytest.raises(ValueError, match="`language_sample_size` must be a positive integer"):
        parse_count(raw, "language_sample_size")


def test_parse_count_allows_zero_min_import_chars() -> None:
    """A zero character threshold is valid and means warn only on empty input."""

    assert parse_count(0, "min_import_chars", minimum=0) == 0
    assert parse_count(" 0 ", "CLIPIMPORT_MIN_IMPORT_CHARS", minimum=0) == 0

    with pytest.raises(ValueError, match="`min_import_chars` must be a non-negative integer"):
        parse_count(-1, "min_import_chars", minimum=0)
