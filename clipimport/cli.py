"""Command-line interface for clipimport.

Responsibilities:
- Expose user-facing commands for text import and segmentation.
- Convert CLI arguments into `ImportConfig` and run the import pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_document_json,
    echo_document_summary,
    echo_language_scores,
    echo_short_input_warning,
    exit_with_command_error,
)
from .config import ConfigLoader, ImportConfig
from .errors import ImportStageError
from .pipeline import ImportPipeline
from .sources import is_substantial_content, read_text_source
from .telemetry.logger import RunLogger
from .text.language import detect_language, score_languages
from .text.segmentation import segment_into_paragraphs, segment_into_sentences

app = typer.Typer(
    name="clipimport",
    no_args_is_help=True,
    help="clipimport CLI.",
)

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a UTF-8 text file. Reads stdin when omitted or `-`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]


def _load_config(config_path: Path | None) -> ImportConfig:
    """Load YAML config when requested, else env config, mapping failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise ImportStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `CLIPIMPORT_*` variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ImportStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ImportStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


@app.command("process")
def process_command(
    input_path: InputArgument = None,
    config_file: ConfigOption = None,
    as_json: Annotated[
        bool | None,
        typer.Option("--json/--summary", help="Print the full document as JSON."),
    ] = None,
    sample: Annotated[
        bool | None,
        typer.Option(
            "--sample/--no-sample",
            help="Process the built-in placeholder document instead of the input.",
        ),
    ] = None,
) -> None:
    """Normalize, segment, and analyze imported text."""

    try:
        config = _load_config(config_file)
        if as_json is not None:
            config.output_format = "json" if as_json else "summary"
        if sample is not None:
            config.use_sample_content = sample
        raw_text = "" if config.use_sample_content else read_text_source(input_path)
        if not config.use_sample_content and not is_substantial_content(
            raw_text, config.min_import_chars
        ):
            echo_short_input_warning(config.min_import_chars)
        pipeline = ImportPipeline(run_logger=RunLogger())
        document = pipeline.run(raw_text, config)
    except Exception as exc:
        exit_with_command_error("process", exc)

    if config.output_format == "json":
        echo_document_json(document)
    else:
        echo_document_summary(document)


@app.command("sentences")
def sentences_command(input_path: InputArgument = None) -> None:
    """Print one sentence per line."""

    try:
        sentences = segment_into_sentences(read_text_source(input_path))
    except Exception as exc:
        exit_with_command_error("sentences", exc)

    for sentence in sentences:
        typer.echo(sentence)


@app.command("paragraphs")
def paragraphs_command(input_path: InputArgument = None) -> None:
    """Print paragraphs separated by blank lines."""

    try:
        paragraphs = segment_into_paragraphs(read_text_source(input_path))
    except Exception as exc:
        exit_with_command_error("paragraphs", exc)

    typer.echo("\n\n".join(paragraphs))


@app.command("detect")
def detect_command(
    input_path: InputArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the detected language and indicator-word scores."""

    try:
        config = _load_config(config_file)
        text = read_text_source(input_path)
        language = detect_language(text, config.language_sample_size)
        scores = score_languages(text, config.language_sample_size)
    except Exception as exc:
        exit_with_command_error("detect", exc)

    echo_language_scores(language, scores)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
