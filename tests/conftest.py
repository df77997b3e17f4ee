"""Shared pytest fixtures for the full clipimport test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def mixed_whitespace_text() -> str:
    """Provide pasted text with CRLF endings, tabs, NBSP, and extra blank lines."""

    return (
        "  First line.\tTabbed  \r\n"
        "Second line\u00a0here. Another one!  \r\n"
        "\r\n"
        "\r\n"
        "\r\n"
        "New paragraph starts. \"Quoted end.\" Then more?\n"
        "   \n"
        "\n"
        "Last paragraph   "
    )


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Write a small two-paragraph English document and return its path."""

    path = tmp_path / "note.txt"
    path.write_text(
        "The cat sat on the mat. It was happy.\n\nThe end of the story.",
        encoding="utf-8",
    )
    return path
