"""Webex notification channel."""

from webexnotify.channels import Notifiable, RoutedNotifiable, WebexChannel
from webexnotify.config import WebexConfig, load_config
from webexnotify.exceptions import (
    ClientError,
    CommunicationError,
    CouldNotCreateNotification,
    CouldNotSendNotification,
    FailedToDetermineRecipient,
    FileAndAttachmentConflict,
    InvalidParentId,
    MissingConfiguration,
    MultipleAttachmentsNotSupported,
    MultipleFilesNotSupported,
    ServerError,
    WebexError,
)
from webexnotify.messages import WebexMessage, WebexMessageAttachment, WebexMessageFile

__version__ = "0.1.0"

__all__ = [
    "WebexChannel",
    "WebexConfig",
    "load_config",
    "Notifiable",
    "RoutedNotifiable",
    "WebexMessage",
    "WebexMessageAttachment",
    "WebexMessageFile",
    "WebexError",
    "CouldNotCreateNotification",
    "CouldNotSendNotification",
    "InvalidParentId",
    "FailedToDetermineRecipient",
    "FileAndAttachmentConflict",
    "MultipleFilesNotSupported",
    "MultipleAttachmentsNotSupported",
    "MissingConfiguration",
    "ClientError",
    "ServerError",
    "CommunicationError",
]
