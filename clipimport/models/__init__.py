"""Data models for clipimport."""

from .datatypes import DocumentStats, ImportResult, ProcessedDocument

__all__ = ["DocumentStats", "ImportResult", "ProcessedDocument"]
