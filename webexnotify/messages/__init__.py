"""Message model for Webex notifications."""

from webexnotify.messages.attachment import WebexMessageAttachment
from webexnotify.messages.file import WebexMessageFile
from webexnotify.messages.message import WebexMessage
from webexnotify.messages.recipient import Recipient, RecipientKind, classify_recipient

__all__ = [
    "WebexMessage",
    "WebexMessageFile",
    "WebexMessageAttachment",
    "Recipient",
    "RecipientKind",
    "classify_recipient",
]
