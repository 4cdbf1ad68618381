"""Tests for data models."""

from datetime import datetime

from novel_import.models import ChapterRecord, ChapterSummary, ImportState


class TestChapterSummary:
    def test_create_summary(self) -> None:
        summary = ChapterSummary(index=0, title="第一章 开始", start_line=3)
        assert summary.title == "第一章 开始"
        assert summary.word_count == 0

    def test_word_count_is_mutable(self) -> None:
        summary = ChapterSummary(index=0, title="A", start_line=0)
        summary.word_count = 12
        assert summary.word_count == 12


class TestChapterRecord:
    def test_record_defaults(self) -> None:
        now = datetime(2026, 3, 1, 9, 30, 0)
        record = ChapterRecord(
            id=1,
            title="第一章",
            content="正文",
            word_count=2,
            created_at=now,
            updated_at=now,
        )
        assert record.description == ""
        assert record.status == "draft"

    def test_record_json_shape(self) -> None:
        now = datetime(2026, 3, 1, 9, 30, 0)
        record = ChapterRecord(
            id=1772357400000,
            title="全文",
            content="正文",
            word_count=2,
            created_at=now,
            updated_at=now,
        )
        data = record.model_dump(mode="json")
        assert set(data) == {
            "id",
            "title",
            "description",
            "content",
            "word_count",
            "status",
            "created_at",
            "updated_at",
        }
        assert data["created_at"] == "2026-03-01T09:30:00"
        restored = ChapterRecord(**data)
        assert restored == record


class TestImportState:
    def test_state_defaults(self) -> None:
        state = ImportState()
        assert state.book_content == ""
        assert state.uploaded_file is None
        assert state.selected_encoding == "utf-8"
        assert state.chapter_mode == "regex"
