"""Fluent builder for a single outgoing Webex message."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from webexnotify.exceptions import (
    FailedToDetermineRecipient,
    FileAndAttachmentConflict,
    InvalidParentId,
    MultipleAttachmentsNotSupported,
    MultipleFilesNotSupported,
)
from webexnotify.messages.attachment import ADAPTIVE_CARD_CONTENT_TYPE, WebexMessageAttachment
from webexnotify.messages.file import WebexMessageFile
from webexnotify.messages.recipient import Recipient, RecipientKind, classify_recipient

# base64 of "ciscospark://us/MESSAGE/<uuid>"
_MESSAGE_ID_RE = re.compile(r"[A-Za-z0-9]{80}")


def is_message_id(value: str) -> bool:
    return bool(_MESSAGE_ID_RE.fullmatch(value))


class WebexMessage:
    """
    One notification for the Webex messages API.

    Setters mutate in place and return the message so calls can be chained:

        WebexMessage().to("user@example.com").markdown("**deploy finished**")

    Structural checks (file/card conflict, missing recipient) run once, when
    the message is serialized.
    """

    def __init__(self, text: str | None = None):
        self._recipient: Recipient | None = None
        self._parent_id: str | None = None
        self._text = text
        self._markdown: str | None = None
        self._files: list[WebexMessageFile] = []
        self._attachments: list[WebexMessageAttachment] = []

    # -- recipient ---------------------------------------------------------

    def to(self, target: str) -> WebexMessage:
        """Send to an email address or, for anything else, a person id."""
        self._recipient = classify_recipient(target)
        return self

    def email(self, email: str) -> WebexMessage:
        self._recipient = Recipient(RecipientKind.EMAIL, email)
        return self

    def person(self, person_id: str) -> WebexMessage:
        self._recipient = Recipient(RecipientKind.PERSON_ID, person_id)
        return self

    def room(self, room_id: str) -> WebexMessage:
        self._recipient = Recipient(RecipientKind.ROOM_ID, room_id)
        return self

    # -- content -----------------------------------------------------------

    def parent(self, parent_id: str) -> WebexMessage:
        """Reply in the thread started by ``parent_id``."""
        if not is_message_id(parent_id):
            raise InvalidParentId(parent_id)
        self._parent_id = parent_id
        return self

    def text(self, text: str) -> WebexMessage:
        self._text = text
        return self

    def markdown(self, markdown: str) -> WebexMessage:
        self._markdown = markdown
        return self

    def card(
        self,
        content: dict[str, Any] | WebexMessageAttachment,
        content_type: str = ADAPTIVE_CARD_CONTENT_TYPE,
    ) -> WebexMessage:
        """Attach one rich card. Webex accepts a single attachment per message."""
        if self._attachments:
            raise MultipleAttachmentsNotSupported()
        if not isinstance(content, WebexMessageAttachment):
            content = WebexMessageAttachment(content=content, content_type=content_type)
        self._attachments.append(content)
        return self

    def file(
        self,
        file: str | Path | WebexMessageFile,
        name: str | None = None,
        mime_type: str | None = None,
    ) -> WebexMessage:
        """Attach one local file. Webex accepts a single file per message."""
        if self._files:
            raise MultipleFilesNotSupported()
        if not isinstance(file, WebexMessageFile):
            file = WebexMessageFile(file, name=name, mime_type=mime_type)
        self._files.append(file)
        return self

    # -- accessors ---------------------------------------------------------

    @property
    def recipient(self) -> Recipient | None:
        return self._recipient

    def _recipient_value(self, kind: RecipientKind) -> str | None:
        if self._recipient is not None and self._recipient.kind is kind:
            return self._recipient.value
        return None

    @property
    def to_person_email(self) -> str | None:
        return self._recipient_value(RecipientKind.EMAIL)

    @property
    def to_person_id(self) -> str | None:
        return self._recipient_value(RecipientKind.PERSON_ID)

    @property
    def room_id(self) -> str | None:
        return self._recipient_value(RecipientKind.ROOM_ID)

    @property
    def parent_id(self) -> str | None:
        return self._parent_id

    @property
    def plain_text(self) -> str | None:
        return self._text

    @property
    def markdown_text(self) -> str | None:
        return self._markdown

    @property
    def attachment(self) -> WebexMessageAttachment | None:
        return self._attachments[0] if self._attachments else None

    @property
    def attached_file(self) -> WebexMessageFile | None:
        return self._files[0] if self._files else None

    def has_recipient(self) -> bool:
        return self._recipient is not None

    def has_file(self) -> bool:
        return bool(self._files)

    # -- serialization -----------------------------------------------------

    def validate(self) -> None:
        """Raise the matching CouldNotCreateNotification if the message cannot be sent."""
        if self._files and self._attachments:
            raise FileAndAttachmentConflict()
        if len(self._files) > 1:
            raise MultipleFilesNotSupported()
        if len(self._attachments) > 1:
            raise MultipleAttachmentsNotSupported()
        if self._recipient is None:
            raise FailedToDetermineRecipient()

    def _scalar_fields(self) -> dict[str, str]:
        fields: dict[str, str] = {}
        if self._recipient is not None:
            fields[self._recipient.field] = self._recipient.value
        if self._parent_id is not None:
            fields["parentId"] = self._parent_id
        if self._text is not None:
            fields["text"] = self._text
        if self._markdown is not None:
            fields["markdown"] = self._markdown
        return fields

    def to_json(self) -> dict[str, Any]:
        """Body for an ``application/json`` request; unset fields are omitted."""
        self.validate()
        payload: dict[str, Any] = dict(self._scalar_fields())
        if self._attachments:
            payload["attachments"] = [item.to_dict() for item in self._attachments]
        return payload

    def to_multipart(self) -> list[dict[str, Any]]:
        """Form parts for a ``multipart/form-data`` request.

        Scalar fields come first, the ``files`` part last. The file is opened
        here; closing it is up to the caller.
        """
        self.validate()
        if not self._files:
            raise ValueError("multipart encoding requires an attached file")
        parts: list[dict[str, Any]] = [
            {"name": key, "contents": value} for key, value in self._scalar_fields().items()
        ]
        parts.append(self._files[0].to_part())
        return parts

    def __repr__(self) -> str:
        return (
            f"WebexMessage(recipient={self._recipient!r}, parent_id={self._parent_id!r}, "
            f"files={len(self._files)}, attachments={len(self._attachments)})"
        )
