from __future__ import annotations

from pathlib import Path

import pytest

from webexnotify.config import WebexConfig, load_config

_KEYS = [
    "WEBEX_URL",
    "WEBEX_ID",
    "WEBEX_TOKEN",
    "WEBEX_TIMEOUT_SECONDS",
    "WEBEX_NOTIFICATION_CHANNEL_URL",
    "WEBEX_NOTIFICATION_CHANNEL_ID",
    "WEBEX_NOTIFICATION_CHANNEL_TOKEN",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults() -> None:
    config = WebexConfig()

    assert config.url == "https://webexapis.com/v1/messages"
    assert config.id == ""
    assert config.token == ""
    assert config.timeout_seconds == 30.0


def test_reads_canonical_environment(monkeypatch) -> None:
    monkeypatch.setenv("WEBEX_ID", "bot-id")
    monkeypatch.setenv("WEBEX_TOKEN", "bot-token")
    monkeypatch.setenv("WEBEX_TIMEOUT_SECONDS", "5")

    config = WebexConfig()

    assert config.id == "bot-id"
    assert config.token == "bot-token"
    assert config.timeout_seconds == 5.0


def test_reads_legacy_environment(monkeypatch) -> None:
    monkeypatch.setenv("WEBEX_NOTIFICATION_CHANNEL_URL", "https://webex.test/v1/messages")
    monkeypatch.setenv("WEBEX_NOTIFICATION_CHANNEL_ID", "bot-id")
    monkeypatch.setenv("WEBEX_NOTIFICATION_CHANNEL_TOKEN", "bot-token")

    config = WebexConfig()

    assert config.url == "https://webex.test/v1/messages"
    assert config.id == "bot-id"
    assert config.token == "bot-token"


def test_canonical_name_wins_over_legacy(monkeypatch) -> None:
    monkeypatch.setenv("WEBEX_TOKEN", "canonical-token")
    monkeypatch.setenv("WEBEX_NOTIFICATION_CHANNEL_TOKEN", "legacy-token")

    assert WebexConfig().token == "canonical-token"


def test_reads_dotenv_in_working_directory(isolated_env: Path) -> None:
    (isolated_env / ".env").write_text(
        "WEBEX_NOTIFICATION_CHANNEL_ID=bot-id\nWEBEX_TOKEN=bot-token\nOTHER_KEY=ignored\n",
        encoding="utf-8",
    )

    config = load_config()

    assert config.id == "bot-id"
    assert config.token == "bot-token"


def test_environment_wins_over_dotenv(monkeypatch, isolated_env: Path) -> None:
    (isolated_env / ".env").write_text("WEBEX_TOKEN=file-token\n", encoding="utf-8")
    monkeypatch.setenv("WEBEX_TOKEN", "env-token")

    assert load_config().token == "env-token"


def test_keyword_arguments_by_field_name() -> None:
    config = WebexConfig(url="https://webex.test", id="bot-id", token="bot-token")

    assert (config.url, config.id, config.token) == ("https://webex.test", "bot-id", "bot-token")
