"""Shared pytest fixtures for speakerlog tests."""
from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's SPEAKERLOG_* env vars and .env out of the tests."""
    for key in ("SPEAKERLOG_TARGET", "SPEAKERLOG_OUTPUT_CSV_PATH", "SPEAKERLOG_POLL_INTERVAL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def csv_path(tmp_path: Path) -> Path:
    """An output path whose parent directories do not exist yet."""
    return tmp_path / "logs" / "nested" / "chat.csv"


@pytest.fixture()
def transcript(tmp_path: Path):
    """Return a factory that writes NDJSON chat transcripts."""

    def _make(records: list[dict | str], name: str = "chat.ndjson") -> Path:
        p = tmp_path / name
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return p

    return _make


@pytest.fixture()
def chat_records() -> list[dict]:
    return [
        {"channel": "Say", "sender": "Alice@Leviathan", "message": "Hi,\nthere"},
        {"channel": "Shout", "sender": "Bob@Leviathan", "message": "WTS glamour"},
        {"type": 13, "sender": "alice@leviathan", "body": 'she said "hello"'},
        {"channel": "Say", "sender": "Alice@Odin", "message": "wrong world"},
    ]
