"""Core datatypes shared across clipimport modules.

Responsibilities:
- Represent immutable records produced by the import pipeline.
- Provide explicit typing and a stable serialization shape.

Key types:
- `ProcessedDocument`, `ImportResult`, and `DocumentStats`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessedDocument:
    """Result of processing one imported text.

    Attributes:
        content: Normalized text all other fields are derived from.
        sentences: Ordered sentences of `content`.
        paragraphs: Ordered paragraphs of `content`.
        word_count: Number of whitespace-delimited words in `content`.
        language: Detected language code (`en`, `pt`, or `es`).
    """

    content: str
    sentences: tuple[str, ...]
    paragraphs: tuple[str, ...]
    word_count: int
    language: str

    def to_dict(self) -> dict[str, object]:
        """Serialize the document using the client-facing key names."""

        return {
            "content": self.content,
            "sentences": list(self.sentences),
            "paragraphs": list(self.paragraphs),
            "wordCount": self.word_count,
            "language": self.language,
        }


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Text selected for import together with its origin.

    Attributes:
        content: Text handed to the processing stages.
        word_count: Number of words in `content`.
        source: `provided` for caller text, `sample` for placeholder content.
    """

    content: str
    word_count: int
    source: str


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Compact counters describing a processed document."""

    sentence_count: int
    paragraph_count: int
    word_count: int
    character_count: int
    language: str

    @classmethod
    def from_document(cls, document: ProcessedDocument) -> DocumentStats:
        """Derive counters from a processed document."""

        return cls(
            sentence_count=len(document.sentences),
            paragraph_count=len(document.paragraphs),
            word_count=document.word_count,
            character_count=len(document.content),
            language=document.language,
        )
