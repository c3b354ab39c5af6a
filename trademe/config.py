"""
Configuration
Credentials value for the Trade Me API and the loaders that build it.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.tmsandbox.co.nz/v1"

# Document key -> attribute name
_DOCUMENT_FIELDS = {
    "BaseUrl": "base_url",
    "ConsumerKey": "consumer_key",
    "ConsumerSecret": "consumer_secret",
    "AccessToken": "access_token",
    "TokenSecret": "token_secret",
}

_ENV_FIELDS = {
    "TRADEME_BASE_URL": "base_url",
    "TRADEME_CONSUMER_KEY": "consumer_key",
    "TRADEME_CONSUMER_SECRET": "consumer_secret",
    "TRADEME_ACCESS_TOKEN": "access_token",
    "TRADEME_TOKEN_SECRET": "token_secret",
}


class Settings:
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    TRADEME_CONFIG_PATH = os.getenv('TRADEME_CONFIG_PATH', 'TradeMeConfig.json')

    TRADEME_TEST_LISTING_ID = os.getenv('TRADEME_TEST_LISTING_ID', '2149713054')
    TRADEME_FILTER_TEST_LISTING_ID = os.getenv('TRADEME_FILTER_TEST_LISTING_ID', '2149712754')

    TRADEME_OTHER_ACCESS_TOKEN = os.getenv('TRADEME_OTHER_ACCESS_TOKEN')
    TRADEME_OTHER_TOKEN_SECRET = os.getenv('TRADEME_OTHER_TOKEN_SECRET')

    REQUEST_TIMEOUT = os.getenv('REQUEST_TIMEOUT')


@dataclass(frozen=True)
class TradeMeConfig:
    """Credentials and endpoint for one Trade Me principal."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
    access_token: str
    token_secret: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self):
        for name in ("consumer_key", "consumer_secret", "access_token", "token_secret", "base_url"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
        if not all([self.consumer_key, self.consumer_secret, self.access_token, self.token_secret]):
            raise ValueError("Missing required authentication credentials")
        if not self.base_url:
            raise ValueError("base_url must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TradeMeConfig":
        """
        Build a config from the ``TradeMeConfig.json`` document shape.

        Args:
            data: Mapping with BaseUrl, ConsumerKey, ConsumerSecret, AccessToken
                and TokenSecret keys. BaseUrl is optional.

        Returns:
            TradeMeConfig instance

        Raises:
            ValueError: if a credential is missing or not a string
        """
        if not isinstance(data, dict):
            raise ValueError("Configuration document must be a JSON object")

        values = {}
        for key, attr in _DOCUMENT_FIELDS.items():
            if key in data:
                values[attr] = data[key]
        missing = [key for key, attr in _DOCUMENT_FIELDS.items()
                   if attr != "base_url" and attr not in values]
        if missing:
            raise ValueError(f"Missing configuration fields: {', '.join(missing)}")
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "TradeMeConfig":
        """Build a config from TRADEME_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {attr: environ.get(name, "") for name, attr in _ENV_FIELDS.items()}
        if not values["base_url"]:
            values["base_url"] = DEFAULT_BASE_URL
        return cls(**values)

    def with_token(self, access_token: str, token_secret: str) -> "TradeMeConfig":
        """Same consumer and endpoint, different principal."""
        return TradeMeConfig(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            access_token=access_token,
            token_secret=token_secret,
            base_url=self.base_url,
        )


def load_config(path: Optional[str] = None) -> TradeMeConfig:
    """
    Read a ``TradeMeConfig.json`` document from disk.

    Args:
        path: File path (default: Settings.TRADEME_CONFIG_PATH)

    Returns:
        TradeMeConfig instance
    """
    path = path or Settings.TRADEME_CONFIG_PATH
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    return TradeMeConfig.from_dict(data)
