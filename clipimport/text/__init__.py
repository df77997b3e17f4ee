"""Text normalization, segmentation, and language detection.

This package provides the deterministic building blocks composed by
`clipimport.pipeline.process_imported_text`.
"""

from .language import detect_language, score_languages
from .normalizer import TextNormalizer, normalize_text
from .segmentation import count_words, segment_into_paragraphs, segment_into_sentences

__all__ = [
    "TextNormalizer",
    "normalize_text",
    "segment_into_sentences",
    "segment_into_paragraphs",
    "count_words",
    "detect_language",
    "score_languages",
]
