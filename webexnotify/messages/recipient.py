"""Recipient targeting for outgoing messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class RecipientKind(str, Enum):
    """Which Webex field a recipient is sent as."""

    EMAIL = "toPersonEmail"
    PERSON_ID = "toPersonId"
    ROOM_ID = "roomId"


@dataclass(frozen=True)
class Recipient:
    """The single active target of a message."""

    kind: RecipientKind
    value: str

    @property
    def field(self) -> str:
        """Wire field name for this recipient."""
        return self.kind.value


def is_email(target: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(target))


def classify_recipient(target: str) -> Recipient:
    """Tag ``target`` as an email address or a person id by its shape.

    Rooms are never inferred; use ``WebexMessage.room`` for those.
    """
    if is_email(target):
        return Recipient(RecipientKind.EMAIL, target)
    return Recipient(RecipientKind.PERSON_ID, target)
