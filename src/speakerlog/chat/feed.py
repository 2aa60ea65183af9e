"""Push-based chat subscription.

Stands in for the host's chat hook: handlers subscribe once and are invoked
synchronously, in subscription order, for every published event.
"""
from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .events import ChatEvent

logger = logging.getLogger(__name__)


@runtime_checkable
class ChatHandler(Protocol):
    """Anything callable with a single ChatEvent."""

    def __call__(self, event: ChatEvent) -> object: ...


class ChatFeed:
    """Fan chat events out to subscribed handlers.

    Usage::

        feed = ChatFeed()
        feed.subscribe(SpeakerLogger("Alice@Leviathan", "chat.csv"))
        for event in reader.parse_file("transcript.ndjson"):
            feed.publish(event)
    """

    def __init__(self) -> None:
        self._handlers: list[ChatHandler] = []

    def subscribe(self, handler: ChatHandler) -> None:
        if not callable(handler):
            raise TypeError(f"{handler!r} is not callable")
        self._handlers.append(handler)
        logger.debug("Subscribed chat handler: %r", handler)

    def unsubscribe(self, handler: ChatHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            return
        logger.debug("Unsubscribed chat handler: %r", handler)

    def publish(self, event: ChatEvent) -> int:
        """Deliver ``event`` to every handler.

        A failing handler is logged and skipped so later handlers and later
        events still get delivered. Returns the number of handlers that
        completed without raising.
        """
        delivered = 0
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Chat handler %r failed on event from %r", handler, event.sender)
                continue
            delivered += 1
        return delivered

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"ChatFeed({len(self._handlers)} handlers)"
