"""
Authentication Module
OAuth 1.0 PLAINTEXT Authorization header for Trade Me API requests.
"""

import time
import uuid
from collections import OrderedDict
from typing import Dict, Optional
from urllib.parse import quote, unquote

from .config import TradeMeConfig

SIGNATURE_METHOD = "PLAINTEXT"
OAUTH_VERSION = "1.0"
SCHEME = "OAuth"


def percent_encode(value: str) -> str:
    """Percent-encode everything outside the RFC 3986 unreserved set."""
    return quote(value, safe="-._~")


class OAuthPlaintext:
    """Build OAuth 1.0 headers using the PLAINTEXT signature method."""

    def __init__(self, config: TradeMeConfig):
        """
        Initialize authentication.

        Args:
            config: Credentials for the principal making requests
        """
        self.config = config

    @property
    def signature(self) -> str:
        """Consumer secret and token secret, each encoded, joined by ``&``."""
        return f"{percent_encode(self.config.consumer_secret)}&{percent_encode(self.config.token_secret)}"

    @staticmethod
    def generate_nonce() -> str:
        return uuid.uuid4().hex

    @staticmethod
    def generate_timestamp() -> str:
        return str(int(time.time()))

    def header_params(self, nonce: Optional[str] = None, timestamp: Optional[str] = None) -> Dict[str, str]:
        """
        Get the OAuth fields for one request.

        Args:
            nonce: Override the generated nonce
            timestamp: Override the generated timestamp

        Returns:
            Ordered mapping of the seven OAuth fields
        """
        return OrderedDict([
            ("oauth_consumer_key", self.config.consumer_key),
            ("oauth_nonce", nonce or self.generate_nonce()),
            ("oauth_signature", self.signature),
            ("oauth_signature_method", SIGNATURE_METHOD),
            ("oauth_timestamp", timestamp or self.generate_timestamp()),
            ("oauth_token", self.config.access_token),
            ("oauth_version", OAUTH_VERSION),
        ])

    def authorization_header(self, nonce: Optional[str] = None, timestamp: Optional[str] = None) -> str:
        """Get the full ``Authorization`` header value with a fresh nonce and timestamp."""
        params = self.header_params(nonce=nonce, timestamp=timestamp)
        fields = ", ".join(f'{name}="{percent_encode(value)}"' for name, value in params.items())
        return f"{SCHEME} {fields}"


def parse_authorization_header(value: str) -> Dict[str, str]:
    """
    Parse an ``OAuth`` header into decoded field values.

    Args:
        value: Authorization header value

    Returns:
        Mapping of field name to decoded value

    Raises:
        ValueError: if the value is not an OAuth header
    """
    prefix = SCHEME + " "
    if not value.startswith(prefix):
        raise ValueError("Not an OAuth authorization header")

    params = OrderedDict()
    for part in value[len(prefix):].split(","):
        part = part.strip()
        if not part:
            continue
        name, _, quoted = part.partition("=")
        if not quoted.startswith('"') or not quoted.endswith('"') or len(quoted) < 2:
            raise ValueError(f"Malformed OAuth field: {part}")
        params[name] = unquote(quoted[1:-1])
    return params


def redact_authorization(value: Optional[str]) -> str:
    """Keep only the first OAuth field, e.g. ``OAuth oauth_consumer_key="abc"...``."""
    if not value:
        return f"{SCHEME} [EMPTY]..."
    first = value.split(SCHEME + " ")[-1].split(",")[0]
    return f"{SCHEME} {first or '[EMPTY]'}..."
