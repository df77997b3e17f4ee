"""Phase logging for import runs.

Each pipeline stage emits one line per event through `loguru`:

    [phase] level=INFO stage=segment event=complete paragraphs=2 sentences=3

Stage, event, and counters travel as bound `extra` fields, and the line is
rendered by a format callable so it stays identical whatever sink is used.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from loguru import logger as _loguru_logger

_SAFE_PUNCTUATION = frozenset("-_.:/")
_RESERVED_EXTRA_KEYS = frozenset({"stage", "event", "phase_line"})


def _log_token(value: object) -> str:
    """Render a context value as a single shell-safe token."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(char if char.isalnum() or char in _SAFE_PUNCTUATION else "_" for char in raw)


def _render_phase_record(record: dict[str, Any]) -> str:
    """Loguru format callable producing the `[phase]` line for a record."""

    extra = record["extra"]
    counters = "".join(
        f" {key}={_log_token(extra[key])}"
        for key in sorted(extra)
        if key not in _RESERVED_EXTRA_KEYS
    )
    extra["phase_line"] = (
        f"[phase] level={record['level'].name} stage={extra.get('stage', 'none')} "
        f"event={extra.get('event', 'none')}{counters}"
    )
    return "{extra[phase_line]}\n"


class RunLogger:
    """Write stage start/complete/failure events for one import run."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Route phase lines to `sink`, stderr by default, replacing other handlers."""

        _loguru_logger.remove()
        _loguru_logger.add(
            sink or sys.stderr,
            format=_render_phase_record,
            level="INFO",
            colorize=False,
        )

    def log_stage_start(self, stage: str) -> None:
        _loguru_logger.bind(stage=stage, event="start").info("start")

    def log_stage_complete(self, stage: str, **counters: object) -> None:
        """Record a finished stage with the counters it produced."""

        _loguru_logger.bind(stage=stage, event="complete", **counters).info("complete")

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Record a failed stage by exception type only, never its message."""

        _loguru_logger.bind(stage=stage, event="failure", error_type=error_type).error(
            "failure"
        )
