"""Configuration module for webexnotify."""

from webexnotify.config.schema import WebexConfig


def load_config() -> WebexConfig:
    """Build the config from the environment and any .env file."""
    return WebexConfig()


__all__ = ["WebexConfig", "load_config"]
