"""Minimal CSV field escaping for single-line chat rows."""
from __future__ import annotations

from typing import Iterable

HEADER_FIELDS = ("channel", "sender", "world", "message")


def encode_field(value: str | None) -> str:
    """Quote a field only when it holds a comma or a double quote."""
    if value is None:
        return ""
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def encode_row(fields: Iterable[str | None]) -> str:
    """Join encoded fields with ``,`` (no trailing delimiter, no newline)."""
    return ",".join(encode_field(f) for f in fields)


HEADER = encode_row(HEADER_FIELDS)
