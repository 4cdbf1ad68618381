"""Data models for the novel import core."""

from novel_import.models.chapter import ChapterRecord, ChapterSummary
from novel_import.models.session import ImportState

__all__ = [
    "ChapterRecord",
    "ChapterSummary",
    "ImportState",
]
