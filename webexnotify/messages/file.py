"""Local file uploads attached to a Webex message."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class WebexMessageFile:
    """A local file to upload alongside a message.

    The file is only opened by :meth:`to_part`, right before the request is
    built, and the caller owns the returned stream.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        name: str | None = None,
        mime_type: str | None = None,
    ):
        self._path = str(path) if path is not None else None
        self._name = name
        self._mime_type = mime_type

    def path(self, path: str | Path) -> WebexMessageFile:
        """Set the path of the file to upload."""
        self._path = str(path)
        return self

    def name(self, name: str) -> WebexMessageFile:
        """Override the filename Webex shows for the upload."""
        self._name = name
        return self

    def type(self, mime_type: str) -> WebexMessageFile:
        """Override the Content-Type of the upload."""
        self._mime_type = mime_type
        return self

    @property
    def file_path(self) -> str | None:
        return self._path

    @property
    def filename(self) -> str | None:
        return self._name

    @property
    def mime_type(self) -> str | None:
        return self._mime_type

    def to_part(self) -> dict[str, Any]:
        """Open the file and describe it as the ``files`` form part.

        Raises ValueError when no path was set and OSError when the file
        cannot be opened.
        """
        if not self._path:
            raise ValueError("file path is required")
        part: dict[str, Any] = {
            "name": "files",
            "contents": open(self._path, "rb"),
        }
        if self._name is not None:
            part["filename"] = self._name
        if self._mime_type is not None:
            part["headers"] = {"Content-Type": self._mime_type}
        return part

    def __repr__(self) -> str:
        return (
            f"WebexMessageFile(path={self._path!r}, name={self._name!r}, "
            f"mime_type={self._mime_type!r})"
        )
