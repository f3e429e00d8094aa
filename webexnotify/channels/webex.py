"""Webex messages API channel."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from webexnotify.channels.base import Notifiable
from webexnotify.config.schema import WebexConfig
from webexnotify.exceptions import (
    ClientError,
    CommunicationError,
    MissingConfiguration,
    ServerError,
)
from webexnotify.messages.message import WebexMessage

CHANNEL_NAME = "webex"


def _multipart_request_args(parts: list[dict[str, Any]]) -> dict[str, Any]:
    """Translate form parts into httpx ``data=``/``files=`` arguments."""
    data: dict[str, str] = {}
    files: list[tuple[str, tuple[str, Any, str | None]]] = []
    for part in parts:
        stream = part["contents"]
        if not hasattr(stream, "read"):
            data[part["name"]] = stream
            continue
        filename = part.get("filename") or Path(stream.name).name
        content_type = part.get("headers", {}).get("Content-Type")
        files.append((part["name"], (filename, stream, content_type)))
    return {"data": data, "files": files}


class WebexChannel:
    """Send a WebexMessage to the Webex messages endpoint.

    Each ``send`` issues exactly one POST and keeps no state between calls.
    """

    def __init__(
        self,
        url: str,
        id: str,
        token: str,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout_seconds: float = 30.0,
    ):
        self.url = url
        self.id = id
        self.token = token
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._transport = transport

    @classmethod
    def from_config(cls, config: WebexConfig, **kwargs: Any) -> WebexChannel:
        return cls(
            config.url,
            config.id,
            config.token,
            timeout_seconds=config.timeout_seconds,
            **kwargs,
        )

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    async def _post(self, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.url, headers=self._headers(), **kwargs)
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self._transport
        ) as client:
            return await client.post(self.url, headers=self._headers(), **kwargs)

    async def send(self, notifiable: Notifiable, message: WebexMessage) -> httpx.Response | None:
        """Deliver ``message`` and return Webex's response.

        Returns None without contacting Webex when ``notifiable`` has no
        Webex route.

        Raises:
            CouldNotCreateNotification: the message is incomplete or invalid.
            MissingConfiguration: url, id or token is empty.
            ClientError / ServerError: Webex answered 4xx / 5xx.
            CommunicationError: no HTTP response was received.
        """
        recipient = notifiable.route_notification_for(CHANNEL_NAME)
        if not recipient:
            logger.debug("No Webex route for notifiable, skipping")
            return None

        if not (self.url and self.id and self.token):
            raise MissingConfiguration()

        if not message.has_recipient():
            message.to(recipient)

        with ExitStack() as stack:
            if message.has_file():
                parts = message.to_multipart()
                for part in parts:
                    if hasattr(part["contents"], "close"):
                        stack.callback(part["contents"].close)
                request_args = _multipart_request_args(parts)
                encoding = "multipart"
            else:
                request_args = {"json": message.to_json()}
                encoding = "json"

            logger.debug(f"Webex POST {self.url} ({encoding})")
            try:
                response = await self._post(**request_args)
                if response.is_error:
                    response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                logger.warning(f"Webex responded with {exc.response.status_code}")
                if exc.response.is_client_error:
                    raise ClientError(exc) from exc
                raise ServerError(exc) from exc
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                logger.warning(f"Could not communicate with Webex: {exc}")
                raise CommunicationError(exc) from exc

        logger.info(f"Webex message sent ({response.status_code})")
        return response
