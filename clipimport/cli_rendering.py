"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
document summaries, and language scores.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import ImportStageError
from .models.datatypes import DocumentStats, ProcessedDocument


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ImportStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_short_input_warning(min_chars: int) -> None:
    """Warn that the provided text is too short to be a meaningful import."""

    typer.secho(
        f"Warning: input has {min_chars} or fewer non-blank characters.",
        fg=typer.colors.YELLOW,
        err=True,
    )


def echo_document_summary(document: ProcessedDocument) -> None:
    """Print document counters and detected language."""

    stats = DocumentStats.from_document(document)
    typer.echo(f"Language: {stats.language}")
    typer.echo(f"Words: {stats.word_count}")
    typer.echo(f"Sentences: {stats.sentence_count}")
    typer.echo(f"Paragraphs: {stats.paragraph_count}")
    typer.echo(f"Characters: {stats.character_count}")


def echo_document_json(document: ProcessedDocument) -> None:
    """Print the document as pretty JSON."""

    typer.echo(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))


def echo_language_scores(language: str, scores: dict[str, int]) -> None:
    """Print the detected language followed by per-language scores."""

    typer.echo(f"Language: {language}")
    for code in sorted(scores):
        typer.echo(f"{code}: {scores[code]}")
