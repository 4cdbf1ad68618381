"""Stateful import session wrapping the reader and the segmenter."""

import logging
from datetime import datetime
from pathlib import Path

from novel_import.config import ImportConfig
from novel_import.ingestion.reader import SUPPORTED_ENCODINGS, DocumentReader
from novel_import.ingestion.segmenter import (
    CHAPTER_MODES,
    FULL_TEXT_TITLE,
    ChapterSegmenter,
)
from novel_import.models.chapter import ChapterRecord, ChapterSummary
from novel_import.models.session import ImportState

logger = logging.getLogger(__name__)


class ImportSession:
    """Holds the text, encoding and chapter mode of one novel import.

    The session starts empty, becomes loaded after a successful
    ``read_file`` and returns to empty on ``reset``. Building and
    previewing chapters is valid in either state.

    Args:
        reader: Reader used by ``read_file``. Defaults to DocumentReader.
        segmenter: Segmenter used for previews and builds.
        config: Defaults for encoding and mode.
    """

    def __init__(
        self,
        reader: DocumentReader | None = None,
        segmenter: ChapterSegmenter | None = None,
        config: ImportConfig | None = None,
    ) -> None:
        self._reader = reader or DocumentReader()
        self._segmenter = segmenter or ChapterSegmenter()
        self._config = config or ImportConfig()
        self.state = self._initial_state()

    def _initial_state(self) -> ImportState:
        return ImportState(
            selected_encoding=self._config.default_encoding,
            chapter_mode=self._config.default_mode,
        )

    @property
    def is_loaded(self) -> bool:
        return self.state.uploaded_file is not None

    @property
    def total_word_count(self) -> int:
        """Character count of the loaded text."""
        return len(self.state.book_content)

    @property
    def parsed_chapters(self) -> list[ChapterSummary]:
        """Live preview of the chapters for the current mode."""
        if self.state.chapter_mode == "single":
            return [
                ChapterSummary(
                    index=0,
                    title=FULL_TEXT_TITLE,
                    start_line=0,
                    word_count=self.total_word_count,
                )
            ]
        return self._segmenter.detect_chapters(self.state.book_content)

    def set_encoding(self, encoding: str) -> None:
        """Select the encoding used for the next text file read.

        Raises:
            ValueError: If encoding is not one of SUPPORTED_ENCODINGS.
        """
        normalized = encoding.lower()
        if normalized not in SUPPORTED_ENCODINGS:
            raise ValueError(
                f"Unsupported encoding: '{encoding}'. "
                f"Supported: {', '.join(SUPPORTED_ENCODINGS)}"
            )
        self.state.selected_encoding = normalized

    def set_mode(self, mode: str) -> None:
        """Select the chapter mode.

        Raises:
            ValueError: If mode is not one of CHAPTER_MODES.
        """
        if mode not in CHAPTER_MODES:
            raise ValueError(
                f"Unsupported chapter mode: '{mode}'. "
                f"Supported: {', '.join(CHAPTER_MODES)}"
            )
        self.state.chapter_mode = mode

    def read_file(self, file_path: str | Path, encoding: str | None = None) -> str:
        """Read a file and load its text into the session.

        The state is left untouched when reading fails.

        Args:
            file_path: Path to a TXT, MD or DOCX file.
            encoding: Overrides the selected encoding for this read.

        Returns:
            The decoded file content.
        """
        enc = encoding if encoding is not None else self.state.selected_encoding
        content = self._reader.read(file_path, encoding=enc)
        self.state.book_content = content
        self.state.uploaded_file = Path(file_path).name
        return content

    def build_chapter_list(self, now: datetime | None = None) -> list[ChapterRecord]:
        """Build chapter records from the loaded text and current mode."""
        mode = self.state.chapter_mode
        detected = (
            self._segmenter.detect_chapters(self.state.book_content)
            if mode == "regex"
            else []
        )
        return self._segmenter.build_chapter_list(
            self.state.book_content,
            mode=mode,
            detected_chapters=detected,
            now=now,
        )

    def reset(self) -> None:
        """Drop the loaded text and restore the default settings."""
        logger.debug("Resetting import session for %s", self.state.uploaded_file)
        self.state = self._initial_state()
