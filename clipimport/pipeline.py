"""Import pipeline orchestration.

Responsibilities:
- Compose normalization, segmentation, and analysis into one document.
- Wrap the stages with start/complete/failure telemetry for CLI runs.

Key types:
- `process_imported_text`: pure one-shot processing function.
- `ImportPipeline`: logged facade used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .config import ImportConfig
from .models.datatypes import ProcessedDocument
from .sources import import_text, is_substantial_content
from .telemetry.logger import RunLogger
from .text.language import DEFAULT_SAMPLE_SIZE, detect_language
from .text.normalizer import normalize_text
from .text.segmentation import count_words, segment_into_paragraphs, segment_into_sentences

_StageResult = TypeVar("_StageResult")


def _build_document(normalized: str, sample_size: int) -> ProcessedDocument:
    """Derive every document field from one normalized string."""

    return ProcessedDocument(
        content=normalized,
        sentences=tuple(segment_into_sentences(normalized)),
        paragraphs=tuple(segment_into_paragraphs(normalized)),
        word_count=count_words(normalized),
        language=detect_language(normalized, sample_size),
    )


def process_imported_text(raw_text: str | None) -> ProcessedDocument:
    """Normalize raw text once and derive sentences, paragraphs, and stats."""

    return _build_document(normalize_text(raw_text), DEFAULT_SAMPLE_SIZE)


class ImportPipeline:
    """Coordinate the stages of a single import run."""

    _PHASE_SEQUENCE = ("import", "normalize", "segment", "analyze")

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize optional telemetry hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(self, raw_text: str | None, config: ImportConfig | None = None) -> ProcessedDocument:
        """Run all stages for raw text and return the processed document."""

        resolved_config = config if config is not None else ImportConfig()
        resolved_config.validate()

        imported = self._run_stage(
            "import",
            lambda: import_text(raw_text, use_sample_content=resolved_config.use_sample_content),
            source=lambda result: result.source,
            substantial=lambda result: is_substantial_content(
                result.content, resolved_config.min_import_chars
            ),
        )
        normalized = self._run_stage(
            "normalize",
            lambda: normalize_text(imported.content),
            chars=len,
        )
        sentences, paragraphs = self._run_stage(
            "segment",
            lambda: (
                tuple(segment_into_sentences(normalized)),
                tuple(segment_into_paragraphs(normalized)),
            ),
            sentences=lambda result: len(result[0]),
            paragraphs=lambda result: len(result[1]),
        )
        word_count, language = self._run_stage(
            "analyze",
            lambda: (
                count_words(normalized),
                detect_language(normalized, resolved_config.language_sample_size),
            ),
            words=lambda result: result[0],
            language=lambda result: result[1],
        )
        return ProcessedDocument(
            content=normalized,
            sentences=sentences,
            paragraphs=paragraphs,
            word_count=word_count,
            language=language,
        )

    def _stage_position(self, stage_name: str) -> tuple[int, int] | None:
        """Return 1-based stage index and total stage count for known stages."""

        try:
            index = self._PHASE_SEQUENCE.index(stage_name) + 1
        except ValueError:
            return None
        return index, len(self._PHASE_SEQUENCE)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        **context: Callable[[_StageResult], object],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        Keyword arguments map log context keys to callables that extract a
        value from the stage result.
        """

        stage_position = self._stage_position(stage_name)
        if stage_position and self._stage_progress_callback is not None:
            self._stage_progress_callback(stage_name, stage_position[0], stage_position[1])
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(
                stage_name,
                **{key: extract(result) for key, extract in context.items()},
            )
        return result
