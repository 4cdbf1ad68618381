"""Heading-based chapter segmentation for imported novel text."""

import logging
import re
from datetime import datetime

from novel_import.models.chapter import ChapterRecord, ChapterSummary

logger = logging.getLogger(__name__)

# Chapter heading patterns, tried in order. A pattern may match anywhere on
# the line; the leftmost match across all patterns wins.
CHAPTER_PATTERNS: dict[str, re.Pattern[str]] = {
    "chinese": re.compile(r"第[一二三四五六七八九十百千万0-9]+[章节]"),
    "latin": re.compile(r"Chapter\s*[0-9]+", re.IGNORECASE),
}

CHAPTER_MODES: tuple[str, ...] = ("regex", "single")

# Title of the single record produced when the text is not split
FULL_TEXT_TITLE = "全文"


def split_lines(text: str) -> list[str]:
    """Split text on newlines only.

    Unlike ``str.splitlines`` this keeps ``\\r`` and other separators as
    part of the line, and an empty string yields a single empty line.

    Args:
        text: Raw document text.

    Returns:
        List of lines.
    """
    return text.split("\n")


class ChapterSegmenter:
    """Splits raw novel text into chapter records.

    Segmentation modes:
    1. ``regex``: Open a new chapter at every line matching a heading
       pattern. Text before the first heading is dropped; if no heading
       is found at all, the whole text becomes one chapter.
    2. ``single``: The whole text becomes one chapter titled "全文".

    Args:
        patterns: Optional heading pattern map replacing CHAPTER_PATTERNS.
    """

    def __init__(self, patterns: dict[str, re.Pattern[str]] | None = None) -> None:
        self._patterns = patterns if patterns is not None else CHAPTER_PATTERNS

    def match_heading(self, line: str) -> str | None:
        """Return the heading marker found on a line, if any.

        Args:
            line: A single line of text.

        Returns:
            The leftmost matched marker, or None if the line is body text.
        """
        best: re.Match[str] | None = None
        for pattern in self._patterns.values():
            match = pattern.search(line)
            if match and (best is None or match.start() < best.start()):
                best = match
        return best.group() if best else None

    def detect_chapters(self, text: str) -> list[ChapterSummary]:
        """Scan the text line by line and collect chapter headings.

        Lines before the first heading are discarded on purpose: they are
        not part of any chapter in regex mode.

        Args:
            text: Raw document text.

        Returns:
            Chapter summaries in discovery order; empty if the text is
            blank or contains no heading.
        """
        if not text or not text.strip():
            return []

        chapters: list[ChapterSummary] = []
        current: ChapterSummary | None = None
        body = ""

        for line_no, line in enumerate(split_lines(text)):
            if self.match_heading(line) is not None:
                if current is not None:
                    current.word_count = len(body)
                    chapters.append(current)
                current = ChapterSummary(
                    index=len(chapters),
                    title=line.strip() or f"第{len(chapters) + 1}章",
                    start_line=line_no,
                )
                body = ""
            elif current is not None:
                body += line + "\n"

        if current is not None:
            current.word_count = len(body)
            chapters.append(current)

        logger.debug("Detected %d chapter headings", len(chapters))
        return chapters

    def extract_content(
        self,
        chapter: ChapterSummary,
        text: str,
        all_chapters: list[ChapterSummary],
    ) -> str:
        """Cut one chapter's text out of the document by line positions.

        The slice starts at the chapter's own heading line and ends before
        the heading of the chapter with the next index (or at the end of
        the document). Only ``start_line`` and ``index`` are used, so
        summaries edited by the user can be passed in directly.

        Args:
            chapter: The chapter to extract.
            text: Full document text.
            all_chapters: All chapter summaries of the document.

        Returns:
            The trimmed chapter content, heading line included.
        """
        lines = split_lines(text)
        next_chapter = next(
            (c for c in all_chapters if c.index == chapter.index + 1), None
        )
        end_line = next_chapter.start_line if next_chapter else len(lines)
        return "\n".join(lines[chapter.start_line:end_line]).strip()

    def build_chapter_list(
        self,
        text: str | None,
        mode: str = "regex",
        detected_chapters: list[ChapterSummary] | None = None,
        now: datetime | None = None,
    ) -> list[ChapterRecord]:
        """Build the chapter records for a novel from imported text.

        Args:
            text: Full document text. None is treated as empty.
            mode: "regex" or "single".
            detected_chapters: Optional pre-computed summaries. Detection
                runs internally when this is None or empty.
            now: Build moment. Defaults to the current time.

        Returns:
            A non-empty list of ChapterRecord objects.

        Raises:
            ValueError: If mode is not a supported chapter mode.
        """
        if mode not in CHAPTER_MODES:
            raise ValueError(
                f"Unsupported chapter mode: '{mode}'. "
                f"Supported: {', '.join(CHAPTER_MODES)}"
            )

        text = text or ""
        build_time = now or datetime.now()
        # Ids are only unique within this build: timestamp plus position
        base_id = int(build_time.timestamp() * 1000)

        if mode == "single":
            return [self._full_text_record(text, base_id, build_time)]

        chapters = detected_chapters or self.detect_chapters(text)
        if not chapters:
            logger.warning("No chapter headings found, importing as a single chapter")
            return [self._full_text_record(text, base_id, build_time)]

        records: list[ChapterRecord] = []
        for position, chapter in enumerate(chapters):
            content = self.extract_content(chapter, text, chapters)
            records.append(
                ChapterRecord(
                    id=base_id + position,
                    title=chapter.title,
                    content=content,
                    word_count=len(content),
                    created_at=build_time,
                    updated_at=build_time,
                )
            )

        logger.info("Built %d chapters from %d characters", len(records), len(text))
        return records

    def _full_text_record(
        self, text: str, base_id: int, build_time: datetime
    ) -> ChapterRecord:
        """Create the single record holding the whole trimmed text."""
        content = text.strip()
        return ChapterRecord(
            id=base_id,
            title=FULL_TEXT_TITLE,
            content=content,
            word_count=len(content),
            created_at=build_time,
            updated_at=build_time,
        )
