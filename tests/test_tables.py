"""Tests for the Rich table helpers."""
from __future__ import annotations

import pytest
from rich.console import Console

from speakerlog.visualization.tables import count_rows, print_counts_table, print_rows_table


def _rows() -> list[dict[str, str]]:
    return [
        {"channel": "Say", "sender": "Alice", "world": "Leviathan", "message": "one"},
        {"channel": "Shout", "sender": "Alice", "world": "Leviathan", "message": "two"},
        {"channel": "Say", "sender": "Alice", "world": "", "message": "three"},
        {"channel": "Say", "sender": "Alice", "world": "Odin", "message": "[/b] not markup"},
    ]


class TestCountRows:
    def test_by_channel(self) -> None:
        assert count_rows(_rows(), "channel") == [("Say", 3), ("Shout", 1)]

    def test_by_sender_groups_name_and_world(self) -> None:
        assert count_rows(_rows(), "sender") == [
            ("Alice@Leviathan", 2),
            ("Alice", 1),
            ("Alice@Odin", 1),
        ]

    def test_unknown_grouping(self) -> None:
        with pytest.raises(ValueError):
            count_rows(_rows(), "message")

    def test_empty(self) -> None:
        assert count_rows([], "sender") == []


class TestPrinting:
    def _console(self) -> Console:
        return Console(record=True, width=120)

    def test_rows_table_does_not_interpret_markup(self) -> None:
        console = self._console()
        print_rows_table(_rows(), console=console)
        assert "[/b] not markup" in console.export_text()

    def test_rows_table_truncates(self) -> None:
        console = self._console()
        print_rows_table(_rows(), max_rows=2, console=console)
        assert "2 more rows" in console.export_text()

    def test_empty_rows(self) -> None:
        console = self._console()
        print_rows_table([], console=console)
        assert "No rows" in console.export_text()

    def test_counts_table(self) -> None:
        console = self._console()
        print_counts_table(_rows(), by="sender", title="chat.csv", console=console)
        text = console.export_text()
        assert "chat.csv by sender" in text
        assert "Alice@Leviathan" in text
