import os
from pathlib import Path

import pytest

from financial_system.config import (
    ENV_CURRENCIES_FILE,
    ENV_EXCHANGE_API,
    ENV_EXCHANGE_API_TIMEOUT,
    Settings,
    load_settings,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (ENV_EXCHANGE_API, ENV_EXCHANGE_API_TIMEOUT, ENV_CURRENCIES_FILE):
        monkeypatch.delenv(name, raising=False)
    # Avoid picking up a developer's .env file
    return tmp_path / "missing.env"


def test_load_settings_defaults(clean_env) -> None:
    assert load_settings(clean_env) == Settings()


def test_load_settings_from_environment(clean_env, monkeypatch) -> None:
    monkeypatch.setenv(ENV_EXCHANGE_API, " https://rates.example.com/latest ")
    monkeypatch.setenv(ENV_EXCHANGE_API_TIMEOUT, "2.5")
    monkeypatch.setenv(ENV_CURRENCIES_FILE, "currencies_list.json")

    settings = load_settings(clean_env)

    assert settings.exchange_api_url == "https://rates.example.com/latest"
    assert settings.exchange_api_timeout == 2.5
    assert settings.currencies_file == Path("currencies_list.json")


def test_load_settings_from_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_EXCHANGE_API}=https://rates.example.com/from-file\n{ENV_EXCHANGE_API_TIMEOUT}=3\n", encoding="utf-8")

    try:
        settings = load_settings(env_file)
    finally:
        # load_dotenv writes into os.environ directly
        os.environ.pop(ENV_EXCHANGE_API, None)
        os.environ.pop(ENV_EXCHANGE_API_TIMEOUT, None)

    assert settings.exchange_api_url == "https://rates.example.com/from-file"
    assert settings.exchange_api_timeout == 3.0


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_load_settings_rejects_invalid_timeout(clean_env, monkeypatch, timeout: str) -> None:
    monkeypatch.setenv(ENV_EXCHANGE_API_TIMEOUT, timeout)
    with pytest.raises(ValueError, match=ENV_EXCHANGE_API_TIMEOUT):
        load_settings(clean_env)
