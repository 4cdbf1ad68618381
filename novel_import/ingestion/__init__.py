"""Novel import: file reading and chapter segmentation."""

from novel_import.ingestion.reader import DocumentReader, FileReadError
from novel_import.ingestion.segmenter import ChapterSegmenter
from novel_import.ingestion.session import ImportSession

__all__ = ["ChapterSegmenter", "DocumentReader", "FileReadError", "ImportSession"]
