"""Speaker logger — filter chat events by sender and append them to CSV."""
from __future__ import annotations

import logging
import os

from .chat.events import ChatEvent
from .chat.identity import Identity, matches, parse_identity
from .config import Settings
from .output.csv_log import CsvLog

logger = logging.getLogger(__name__)


class CsvWriteError(OSError):
    """Creating or appending to the output CSV failed."""


def normalize_body(text: str) -> str:
    """Replace each CR and LF with a single space so a message stays on one row."""
    return text.replace("\r", " ").replace("\n", " ")


class SpeakerLogger:
    """Log every chat line spoken by one target to an append-only CSV file.

    ``target`` is ``Name`` or ``Name@World``; a blank target disables logging
    and the output file is never touched.

    Usage::

        speaker_log = SpeakerLogger("Alice@Leviathan", "chat.csv")
        feed.subscribe(speaker_log)   # errors are logged, never raised
    """

    def __init__(self, target: str | Identity, output_path: str | os.PathLike[str]) -> None:
        self.target = target if isinstance(target, Identity) else parse_identity(target)
        self.csv = CsvLog(output_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SpeakerLogger":
        return cls(settings.target, settings.output_csv_path)

    @property
    def enabled(self) -> bool:
        return bool(self.target.name)

    def on_event(self, event: ChatEvent) -> bool:
        """Append ``event`` if its sender is the target.

        Returns True when a row was written.

        Raises:
            CsvWriteError: the output directory, file or row could not be written,
                including rows that cannot be encoded as UTF-8.
        """
        if not self.enabled:
            return False

        sender = parse_identity(event.sender)
        if not matches(sender, self.target):
            return False

        row = (event.channel, sender.name, sender.realm, normalize_body(event.message or ""))
        try:
            self.csv.append(row)
        except (OSError, UnicodeError) as exc:
            raise CsvWriteError(f"Failed to append chat row to {self.csv.path}: {exc}") from exc
        logger.debug("Logged %s line from %s", event.channel, sender)
        return True

    def __call__(self, event: ChatEvent) -> bool:
        """Event-handler boundary: write errors are logged and the event dropped."""
        try:
            return self.on_event(event)
        except CsvWriteError as exc:
            logger.warning("Failed to write chat CSV row: %s", exc)
            return False

    def __repr__(self) -> str:
        return f"SpeakerLogger(target={str(self.target)!r}, path={str(self.csv.path)!r})"
