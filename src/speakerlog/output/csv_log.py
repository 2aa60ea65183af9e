"""Append-only CSV log file.

The file is created with its header row on first use and is only ever
appended to afterwards. Each call opens, writes, fsyncs and closes the file,
so no handle outlives a single event.
"""
from __future__ import annotations

import csv
import logging
import os
import threading
from pathlib import Path
from typing import Iterable, Iterator

from .csv_encoder import HEADER, HEADER_FIELDS, encode_row

logger = logging.getLogger(__name__)


class CsvLog:
    """Serialised, durable appends to one CSV file.

    Usage::

        log = CsvLog("~/Documents/SpeakerLogger/chat.csv")
        log.append(("Say", "Alice", "Leviathan", "hello"))
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def ensure_header(self) -> bool:
        """Create parent directories and the header row if the file is missing.

        Returns True if this call created the file.
        """
        with self._lock:
            return self._ensure_header()

    def append(self, fields: Iterable[str]) -> None:
        """Append one encoded row, creating the file and header first if needed."""
        line = encode_row(fields) + "\n"
        with self._lock:
            self._ensure_header()
            with self.path.open("a", encoding="utf-8", newline="") as fh:
                fh.write(line)
                fh.flush()
                os.fsync(fh.fileno())

    def read_rows(self) -> Iterator[dict[str, str]]:
        """Stream logged rows back as dicts keyed by the header fields."""
        with self.path.open(encoding="utf-8", newline="") as fh:
            yield from csv.DictReader(fh)

    def _ensure_header(self) -> bool:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            # "x" fails if another writer got there first; the header stays single.
            with self.path.open("x", encoding="utf-8", newline="") as fh:
                fh.write(HEADER + "\n")
                fh.flush()
                os.fsync(fh.fileno())
        except FileExistsError:
            return False
        logger.info("Created %s with header %s", self.path, ",".join(HEADER_FIELDS))
        return True

    def __repr__(self) -> str:
        return f"CsvLog({str(self.path)!r})"
