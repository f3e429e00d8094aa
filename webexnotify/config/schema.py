"""Configuration schema using Pydantic."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WebexConfig(BaseSettings):
    """Webex service configuration for the notification channel.

    Each connection setting also accepts the WEBEX_NOTIFICATION_CHANNEL_*
    name used by the Laravel channel config.
    """
    url: str = Field(
        default="https://webexapis.com/v1/messages",  # Messages endpoint, used as-is
        validation_alias=AliasChoices("WEBEX_URL", "WEBEX_NOTIFICATION_CHANNEL_URL"),
    )
    id: str = Field(
        default="",  # Sender's Webex person/bot id
        validation_alias=AliasChoices("WEBEX_ID", "WEBEX_NOTIFICATION_CHANNEL_ID"),
    )
    token: str = Field(
        default="",  # Sender's access token (bot token)
        validation_alias=AliasChoices("WEBEX_TOKEN", "WEBEX_NOTIFICATION_CHANNEL_TOKEN"),
    )
    timeout_seconds: float = 30.0

    # Later files win; real environment variables beat both.
    model_config = SettingsConfigDict(
        env_prefix="WEBEX_",
        env_file=("~/.webexnotify/.env", ".env"),
        populate_by_name=True,
        extra="ignore",
    )
