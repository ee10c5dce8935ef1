"""Tests for CLI entry point."""

import json

import pytest
from loguru import logger

from cleanfile.cli import build_parser, merge_cli_args, run
from cleanfile.config import CleanfileConfig, ConfigLoader


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Ignore any user or project config files on the test machine."""
    monkeypatch.setattr(ConfigLoader, "CONFIG_LOCATIONS", [])
    yield
    logger.remove()


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes("h\u00e9llo\u200b\x07\r\nworld\r\n".encode("utf-8"))
    return path


class TestMergeCliArgs:
    def test_no_flags_keeps_config(self):
        args = build_parser().parse_args(["in.txt"])
        config = merge_cli_args(CleanfileConfig(ascii=False, os="windows"), args)

        assert config.ascii is False
        assert config.os == "windows"

    def test_flags_override_config(self):
        args = build_parser().parse_args(["in.txt", "--ascii", "--no-backup", "--os", "mac9"])
        config = merge_cli_args(CleanfileConfig(ascii=False, backup=True), args)

        assert config.ascii is True
        assert config.backup is False
        assert config.os == "mac9"

    def test_dashed_boolean_flag(self):
        args = build_parser().parse_args(["in.txt", "--no-preserve-newlines"])
        assert merge_cli_args(CleanfileConfig(), args).preserve_newlines is False


class TestRun:
    def test_cleans_file_and_prints_report(self, input_file, capsys):
        assert run([str(input_file), "--no-backup"]) == 0

        output = input_file.with_name("in_cleaned.txt")
        assert output.read_bytes() == b"hllo\nworld\n"
        out = capsys.readouterr().out
        assert "FILE CLEANING REPORT" in out
        assert "Total removed:        3 characters" in out

    def test_backup_created_by_default(self, input_file):
        original = input_file.read_bytes()
        assert run([str(input_file)]) == 0

        backup = input_file.with_name("in.txt.bak")
        assert backup.read_bytes() == original

    def test_no_backup(self, input_file):
        assert run([str(input_file), "--no-backup"]) == 0
        assert not input_file.with_name("in.txt.bak").exists()

    def test_explicit_output_and_windows_endings(self, input_file, tmp_path):
        output = tmp_path / "custom.txt"
        assert run([str(input_file), "-o", str(output), "--os", "windows", "--no-backup"]) == 0
        assert output.read_bytes() == b"hllo\r\nworld\r\n"

    def test_keep_non_ascii(self, input_file):
        assert run([str(input_file), "--no-ascii", "--no-backup"]) == 0

        output = input_file.with_name("in_cleaned.txt")
        assert output.read_text(encoding="utf-8") == "h\u00e9llo\nworld\n"

    def test_json_report(self, input_file, capsys):
        assert run([str(input_file), "--json", "--no-backup"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["stats"]["removed_chars"] == 3
        assert data["stats"]["line_endings_converted"] == 2

    def test_details(self, input_file, capsys):
        assert run([str(input_file), "--details", "--no-backup"]) == 0
        assert "Detailed Character Breakdown" in capsys.readouterr().out

    def test_strip_mismatch_fails_without_output(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text("<!DOCTYPE html>\n<p>hi</p>\n", encoding="utf-8")

        assert run([str(page), "--strip", "markdown", "--no-backup"]) == 1
        assert "does not appear to be Markdown (detected: html)" in capsys.readouterr().err
        assert not page.with_name("page_cleaned.html").exists()

    def test_strip_html(self, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("<!DOCTYPE html>\n<p>Fish &amp; chips</p>\n", encoding="utf-8")

        assert run([str(page), "--strip", "html", "--no-backup"]) == 0
        assert "Fish & chips" in page.with_name("page_cleaned.html").read_text(encoding="utf-8")

    def test_invalid_os(self, input_file, capsys):
        assert run([str(input_file), "--os", "amiga"]) == 1
        assert "Invalid target OS" in capsys.readouterr().err

    def test_invalid_strip_format(self, input_file, capsys):
        assert run([str(input_file), "--strip", "rtf"]) == 1
        assert "Invalid strip format" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        assert run([str(tmp_path / "missing.txt")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_output_same_as_input(self, input_file, capsys):
        assert run([str(input_file), "-o", str(input_file)]) == 1
        assert "cannot be the same" in capsys.readouterr().err
        assert not input_file.with_name("in.txt.bak").exists()

    def test_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\x00")

        assert run([str(path), "--no-backup"]) == 1
        assert "not valid utf-8" in capsys.readouterr().err

    def test_config_file(self, input_file, tmp_path):
        config = tmp_path / "cfg.yaml"
        config.write_text("ascii: false\nbackup: false\n", encoding="utf-8")

        assert run([str(input_file), "--config", str(config)]) == 0

        assert not input_file.with_name("in.txt.bak").exists()
        output = input_file.with_name("in_cleaned.txt")
        assert output.read_text(encoding="utf-8") == "h\u00e9llo\nworld\n"

    def test_bad_config_file(self, input_file, tmp_path, capsys):
        config = tmp_path / "cfg.yaml"
        config.write_text("os: amiga\n", encoding="utf-8")

        assert run([str(input_file), "--config", str(config)]) == 1
        assert "Invalid target OS" in capsys.readouterr().err
