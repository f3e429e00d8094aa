"""Rich card attachments (Adaptive Cards)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"


@dataclass
class WebexMessageAttachment:
    """A structured card sent in the ``attachments`` array."""

    content: dict[str, Any] = field(default_factory=dict)
    content_type: str = ADAPTIVE_CARD_CONTENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {"contentType": self.content_type, "content": self.content}
