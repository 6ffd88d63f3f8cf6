from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from financial_system.providers.http_rates import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Environment variable names
ENV_EXCHANGE_API = "EXCHANGE_API"
ENV_EXCHANGE_API_TIMEOUT = "EXCHANGE_API_TIMEOUT"
ENV_CURRENCIES_FILE = "CURRENCIES_FILE"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration of the financial system.

    Attributes:
        exchange_api_url: URL of the exchange rates endpoint. If None, no HTTP
            rate provider is configured.
        exchange_api_timeout: Seconds to wait for the rates endpoint.
        currencies_file: Path of an ISO-4217 JSON currency list. If None, the
            predefined currencies are used.
    """

    exchange_api_url: str | None = None
    exchange_api_timeout: float = DEFAULT_TIMEOUT
    currencies_file: Path | None = None


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Read `Settings` from environment variables.

    Values from $env_file (or from a `.env` file found by python-dotenv when
    $env_file is None) are loaded first; variables already present in the
    environment win.

    Raises:
        ValueError: If `EXCHANGE_API_TIMEOUT` is not a positive number.
    """
    load_dotenv(dotenv_path=env_file)

    exchange_api_url = os.environ.get(ENV_EXCHANGE_API, "").strip() or None

    raw_timeout = os.environ.get(ENV_EXCHANGE_API_TIMEOUT, "").strip()
    if raw_timeout:
        try:
            exchange_api_timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"${ENV_EXCHANGE_API_TIMEOUT} must be a number, but provided value is: '{raw_timeout}'") from e
        if exchange_api_timeout <= 0:
            raise ValueError(f"${ENV_EXCHANGE_API_TIMEOUT} must be positive, but provided value is: '{raw_timeout}'")
    else:
        exchange_api_timeout = DEFAULT_TIMEOUT

    raw_currencies_file = os.environ.get(ENV_CURRENCIES_FILE, "").strip()
    currencies_file = Path(raw_currencies_file) if raw_currencies_file else None

    settings = Settings(
        exchange_api_url=exchange_api_url,
        exchange_api_timeout=exchange_api_timeout,
        currencies_file=currencies_file,
    )
    logger.debug(f"Loaded settings: exchange API configured={exchange_api_url is not None}, currencies file={currencies_file}")
    return settings
