"""Chat transcript reader — newline-delimited JSON, one event per line.

Each line is an object such as::

    {"channel": "Say", "sender": "Alice@Leviathan", "message": "hi"}
    {"type": 13, "sender": "Bob", "body": "psst"}
"""
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Iterator

from .events import ChatEvent

logger = logging.getLogger(__name__)


class TranscriptReader:
    """Stream ChatEvents out of NDJSON transcripts."""

    def parse_line(self, line: str) -> ChatEvent | None:
        """Parse one transcript line. Returns None for lines that are not events."""
        line = line.strip()
        if not line:
            return None
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            logger.debug("Skipping non-JSON transcript line: %.80s", line)
            return None
        if not isinstance(data, dict) or not data.get("sender"):
            return None
        return ChatEvent.from_dict(data)

    def parse_file(self, path: str | Path) -> Iterator[ChatEvent]:
        """Stream-parse a transcript file, one line at a time."""
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                event = self.parse_line(line)
                if event is not None:
                    yield event

    def follow(
        self,
        path: str | Path,
        poll_interval: float = 0.25,
        from_start: bool = False,
    ) -> Iterator[ChatEvent]:
        """Yield events appended to ``path`` until the caller stops iterating.

        Starts at the end of the file unless ``from_start`` is set. If the
        file shrinks (rotated or truncated) reading restarts from the top.
        """
        path = Path(path)
        while not path.exists():
            time.sleep(poll_interval)

        offset = 0 if from_start else path.stat().st_size
        pending = ""
        while True:
            size = path.stat().st_size
            if size < offset:
                logger.info("Transcript %s was rotated; restarting from the top", path)
                offset = 0
                pending = ""
            if size > offset:
                with path.open(encoding="utf-8", errors="replace") as fh:
                    fh.seek(offset)
                    data = fh.read()
                    offset = fh.tell()
                lines = (pending + data).split("\n")
                # Keep a partially written last line for the next poll.
                pending = lines.pop()
                for line in lines:
                    event = self.parse_line(line)
                    if event is not None:
                        yield event
            time.sleep(poll_interval)
