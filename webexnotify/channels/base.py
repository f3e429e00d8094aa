"""Notifiable targets the channel routes messages to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifiable(Protocol):
    """Anything that can tell a channel where its notifications go."""

    def route_notification_for(self, channel: str) -> str | None:
        """Return the address for ``channel``, or None to skip it."""
        ...


@dataclass
class RoutedNotifiable:
    """Ad-hoc notifiable built from a channel -> address mapping."""

    routes: dict[str, str] = field(default_factory=dict)

    def route(self, channel: str, address: str) -> RoutedNotifiable:
        self.routes[channel] = address
        return self

    def route_notification_for(self, channel: str) -> str | None:
        return self.routes.get(channel)
