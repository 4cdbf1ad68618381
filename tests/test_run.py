"""Tests for the command line entry point."""

import json
from pathlib import Path

import pytest

from run import main


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    # Missing file: defaults are used
    return tmp_path / "missing.yaml"


class TestMain:
    def test_prints_chapter_json(
        self, tmp_path: Path, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        f = tmp_path / "novel.txt"
        f.write_text("Chapter 1\nHello\nChapter 2\nWorld", encoding="utf-8")

        exit_code = main([str(f), "--config", str(config_path)])

        assert exit_code == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["title"] for r in records] == ["Chapter 1", "Chapter 2"]
        assert records[1]["content"] == "Chapter 2\nWorld"
        assert records[1]["id"] == records[0]["id"] + 1

    def test_single_mode_keeps_chinese(
        self, tmp_path: Path, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        f = tmp_path / "novel.txt"
        f.write_bytes("第一章 开始\n内容".encode("gbk"))

        exit_code = main(
            [str(f), "--encoding", "gbk", "--mode", "single", "--config", str(config_path)]
        )

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "全文" in out
        assert json.loads(out)[0]["content"] == "第一章 开始\n内容"

    def test_missing_file_exits_with_error(
        self, config_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["/nonexistent/novel.txt", "--config", str(config_path)])
        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_env_config_exits_with_error(
        self,
        tmp_path: Path,
        config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        f = tmp_path / "novel.txt"
        f.write_text("Chapter 1\nHello", encoding="utf-8")
        monkeypatch.setenv("NOVEL_IMPORT_MODE", "Single")

        exit_code = main([str(f), "--config", str(config_path)])

        assert exit_code == 1
        assert "invalid configuration" in capsys.readouterr().err
