"""Top-level package for clipimport.

This package normalizes pasted text and splits it into sentences and
paragraphs for annotation. The main entry point is `process_imported_text`.
"""

from .models.datatypes import ProcessedDocument
from .pipeline import ImportPipeline, process_imported_text
from .text.language import detect_language
from .text.normalizer import normalize_text
from .text.segmentation import count_words, segment_into_paragraphs, segment_into_sentences

__all__ = [
    "ImportPipeline",
    "ProcessedDocument",
    "count_words",
    "detect_language",
    "normalize_text",
    "process_imported_text",
    "segment_into_paragraphs",
    "segment_into_sentences",
    "__version__",
]

__version__ = "0.1.0"
