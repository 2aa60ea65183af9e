"""Chat events as delivered by the host client."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ChatType(IntEnum):
    """Numeric chat channel codes used by the game client."""

    NONE = 0
    DEBUG = 1
    URGENT = 2
    NOTICE = 3
    SAY = 10
    SHOUT = 11
    TELL_OUTGOING = 12
    TELL_INCOMING = 13
    PARTY = 14
    ALLIANCE = 15
    LS1 = 16
    LS2 = 17
    LS3 = 18
    LS4 = 19
    LS5 = 20
    LS6 = 21
    LS7 = 22
    LS8 = 23
    FREE_COMPANY = 24
    NOVICE_NETWORK = 27
    CUSTOM_EMOTE = 28
    STANDARD_EMOTE = 29
    YELL = 30
    CROSS_PARTY = 32
    PVP_TEAM = 36
    CROSS_LINK_SHELL1 = 37
    ECHO = 56
    SYSTEM_MESSAGE = 57
    SYSTEM_ERROR = 58
    GATHERING_SYSTEM_MESSAGE = 59
    ERROR_MESSAGE = 60
    RETAINER_SALE = 71
    CROSS_LINK_SHELL2 = 101
    CROSS_LINK_SHELL3 = 102
    CROSS_LINK_SHELL4 = 103
    CROSS_LINK_SHELL5 = 104
    CROSS_LINK_SHELL6 = 105
    CROSS_LINK_SHELL7 = 106
    CROSS_LINK_SHELL8 = 107

    @property
    def label(self) -> str:
        # SAY -> "Say", TELL_INCOMING -> "TellIncoming", LS1 -> "Ls1"
        if self is ChatType.PVP_TEAM:
            return "PvPTeam"
        return "".join(part.capitalize() for part in self.name.split("_"))


def channel_label(value: int | str) -> str:
    """Return the display label for a channel code; unknown codes stay numeric."""
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            return value
    try:
        return ChatType(value).label
    except ValueError:
        return str(value)


@dataclass(frozen=True)
class ChatEvent:
    """One chat message: channel label, raw sender text and raw body."""

    channel: str
    sender: str
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatEvent":
        """Build an event from a transcript record.

        Accepts ``channel`` or ``type`` for the channel (label or numeric
        code) and ``message`` or ``body`` for the text.
        """
        channel = data.get("channel", data.get("type"))
        body = data.get("message", data.get("body", ""))
        return cls(
            channel=channel_label(channel) if channel not in (None, "") else "",
            sender=str(data.get("sender") or ""),
            message=str(body if body is not None else ""),
        )
