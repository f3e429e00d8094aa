"""Notification channels."""

from webexnotify.channels.base import Notifiable, RoutedNotifiable
from webexnotify.channels.webex import WebexChannel

__all__ = ["Notifiable", "RoutedNotifiable", "WebexChannel"]
