"""Errors raised while building or sending Webex notifications."""

from __future__ import annotations

import httpx


class WebexError(RuntimeError):
    """Base class for all webexnotify errors."""


class CouldNotCreateNotification(WebexError):
    """Raised when a message cannot be built from the values it was given."""


class InvalidParentId(CouldNotCreateNotification):
    def __init__(self, parent_id: str):
        super().__init__(f"The id `{parent_id}` is not a valid message resource identifier.")
        self.parent_id = parent_id


class FailedToDetermineRecipient(CouldNotCreateNotification):
    def __init__(self) -> None:
        super().__init__("Failed to determine the message recipient.")


class FileAndAttachmentConflict(CouldNotCreateNotification):
    def __init__(self) -> None:
        super().__init__(
            "Sending local file(s) and attachment(s) in the same message is not supported"
        )


class MultipleFilesNotSupported(CouldNotCreateNotification):
    def __init__(self) -> None:
        super().__init__("Sending multiple files in the same message is not supported")


class MultipleAttachmentsNotSupported(CouldNotCreateNotification):
    def __init__(self) -> None:
        super().__init__("Sending multiple attachments in the same message is not supported")


class CouldNotSendNotification(WebexError):
    """Raised when a message could not be delivered to Webex.

    ``code`` holds the HTTP status for client/server errors and
    ``original_error`` the exception raised by httpx, if any.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.original_error = original_error


class MissingConfiguration(CouldNotSendNotification):
    def __init__(self) -> None:
        super().__init__("Please ensure that Webex service url, id, and token are set.")


class ClientError(CouldNotSendNotification):
    """Webex rejected the request (4xx)."""

    def __init__(self, original_error: httpx.HTTPStatusError):
        code = original_error.response.status_code
        super().__init__(
            f"Webex responded with client error {code}.",
            code=code,
            original_error=original_error,
        )

    @property
    def status_code(self) -> int:
        return self.code


class ServerError(CouldNotSendNotification):
    """Webex failed to handle the request (5xx)."""

    def __init__(self, original_error: httpx.HTTPStatusError):
        code = original_error.response.status_code
        super().__init__(
            f"Webex responded with server error {code}.",
            code=code,
            original_error=original_error,
        )

    @property
    def status_code(self) -> int:
        return self.code


class CommunicationError(CouldNotSendNotification):
    """The request never produced an HTTP response (DNS, timeout, reset, ...)."""

    def __init__(self, original_error: Exception):
        super().__init__(
            f"Could not communicate with Webex: {original_error}",
            original_error=original_error,
        )
