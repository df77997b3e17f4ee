"""Domain exceptions for import and CLI diagnostics."""

from __future__ import annotations


class ImportStageError(RuntimeError):
    """Raised when a specific import stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped import error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
