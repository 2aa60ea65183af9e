"""Sender identities in ``Name`` or ``Name@World`` form."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """A chat sender: character name plus optional home world.

    ``realm`` is empty when the raw string carried no world.
    """

    name: str
    realm: str = ""

    def __str__(self) -> str:
        return f"{self.name}@{self.realm}" if self.realm else self.name


def parse_identity(raw: str) -> Identity:
    """Split ``raw`` on the first ``@`` into a trimmed (name, realm) pair.

    Never raises: an empty string gives an identity with an empty name.
    """
    raw = (raw or "").strip()
    name, sep, realm = raw.partition("@")
    if not sep:
        return Identity(raw, "")
    return Identity(name.strip(), realm.strip())


def matches(sender: Identity, target: Identity) -> bool:
    """Return True if ``sender`` is the configured ``target``.

    Names compare case-insensitively. A target without a realm matches the
    name on every world.
    """
    if sender.name.casefold() != target.name.casefold():
        return False
    if not target.realm:
        return True
    return sender.realm.casefold() == target.realm.casefold()
