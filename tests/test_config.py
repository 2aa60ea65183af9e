"""Tests for pydantic-settings configuration."""
from __future__ import annotations

from pathlib import Path

import pytest

from speakerlog.config import Settings, default_output_path, load_settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.target == ""
        assert s.output_csv_path == default_output_path()
        assert s.output_csv_path.parts[-2:] == ("SpeakerLogger", "chat.csv")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("SPEAKERLOG_TARGET", "  Alice@Leviathan ")
        monkeypatch.setenv("SPEAKERLOG_OUTPUT_CSV_PATH", str(tmp_path / "a.csv"))
        s = Settings()
        assert s.target == "Alice@Leviathan"
        assert s.output_csv_path == tmp_path / "a.csv"

    def test_blank_path_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEAKERLOG_OUTPUT_CSV_PATH", "   ")
        assert Settings().output_csv_path == default_output_path()

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("SPEAKERLOG_TARGET=Bob\n", encoding="utf-8")
        assert Settings().target == "Bob"

    def test_load_settings_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPEAKERLOG_TARGET", "Alice")
        assert load_settings(target="Bob").target == "Bob"
        assert load_settings(target=None).target == "Alice"
