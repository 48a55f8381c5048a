"""Tests for API key file lookup."""

import logging
import sys
from pathlib import Path

from barweather.config.loader import default_key_dirs, load_api_key


class TestLoadApiKey:
    def test_strips_trailing_newline(self, tmp_path: Path):
        (tmp_path / "api_key.txt").write_text("abc123\n")
        assert load_api_key([tmp_path]) == "abc123"

    def test_strips_embedded_newlines(self, tmp_path: Path):
        (tmp_path / "api_key.txt").write_text("abc\n123\n")
        assert load_api_key([tmp_path]) == "abc123"

    def test_prefers_first_dir(self, tmp_path: Path):
        exe_dir = tmp_path / "bin"
        cwd = tmp_path / "cwd"
        exe_dir.mkdir()
        cwd.mkdir()
        (exe_dir / "api_key.txt").write_text("from-exe")
        (cwd / "api_key.txt").write_text("from-cwd")
        assert load_api_key([exe_dir, cwd]) == "from-exe"

    def test_falls_back_to_second_dir(self, tmp_path: Path):
        exe_dir = tmp_path / "bin"
        cwd = tmp_path / "cwd"
        exe_dir.mkdir()
        cwd.mkdir()
        (cwd / "api_key.txt").write_text("from-cwd\n")
        assert load_api_key([exe_dir, cwd]) == "from-cwd"

    def test_missing_file_is_empty_key(self, tmp_path: Path, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_api_key([tmp_path]) == ""
        assert "api_key.txt" in caplog.text

    def test_custom_filename(self, tmp_path: Path):
        (tmp_path / "owm.key").write_text("k")
        assert load_api_key([tmp_path], filename="owm.key") == "k"


class TestDefaultKeyDirs:
    def test_executable_dir_then_cwd(self, tmp_path: Path, monkeypatch):
        exe = tmp_path / "bin" / "barweather"
        monkeypatch.setattr(sys, "argv", [str(exe)])
        monkeypatch.chdir(tmp_path)
        dirs = default_key_dirs()
        assert dirs[0] == (tmp_path / "bin").resolve()
        assert dirs[1] == Path.cwd()

    def test_default_lookup_uses_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "nowhere" / "barweather")])
        monkeypatch.chdir(tmp_path)
        (tmp_path / "api_key.txt").write_text("cwd-key\n")
        assert load_api_key() == "cwd-key"
