"""
Trade Me API Client
Authenticated access to listings and the member's watchlist.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .auth import OAuthPlaintext
from .config import Settings, TradeMeConfig
from .observers import LoggingObserver, RequestObserver

DEFAULT_FORMAT = "json"


def listing_path(listing_id: str, format: str = DEFAULT_FORMAT) -> str:
    return f"listings/{listing_id}.{format}"


def watchlist_path(filter: str = "", format: str = DEFAULT_FORMAT) -> str:
    """Whole watchlist when ``filter`` is blank, else the filtered view. The filter is not validated."""
    if not filter or not filter.strip():
        return f"mytrademe/watchList.{format}"
    return f"mytrademe/watchList/{filter}.{format}"


def watchlist_item_path(listing_id: str, format: str = DEFAULT_FORMAT) -> str:
    return f"mytrademe/watchList/{listing_id}.{format}"


def resolve_timeout(value) -> Optional[float]:
    """
    Normalise a timeout setting.

    Args:
        value: Seconds as a number or string; None or blank for no timeout

    Returns:
        Seconds as float, or None when unset or not positive

    Raises:
        ValueError: if the value is not a number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Request timeout must be a number of seconds, got {value!r}")
    return seconds if seconds > 0 else None


def resolve_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


@dataclass
class RequestDescriptor:
    """One outgoing call. Built fresh per request and discarded after dispatch."""

    method: str
    path: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class ApiResponse:
    """Status and raw body as returned by the service, or the transport error."""

    status_code: int
    reason: str = ""
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional[BaseException] = None
    elapsed: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body. Raises ValueError if it is not JSON."""
        return json.loads(self.text)

    @classmethod
    def from_requests(cls, response: requests.Response) -> "ApiResponse":
        return cls(
            status_code=response.status_code,
            reason=response.reason or "",
            text=response.text or "",
            headers=dict(response.headers),
            elapsed=response.elapsed.total_seconds() if response.elapsed is not None else None,
        )

    @classmethod
    def from_error(cls, error: BaseException) -> "ApiResponse":
        return cls(status_code=0, reason=type(error).__name__, error=error)


class BaseClient:
    """Request construction shared by the sync and async clients."""

    def __init__(self, config: TradeMeConfig, observer: Optional[RequestObserver] = None,
                 timeout: Optional[float] = None):
        """
        Args:
            config: Credentials and base URL
            observer: Receives a trace of each request (default: LoggingObserver)
            timeout: Per-request timeout in seconds (default: transport default)
        """
        self.config = config
        self.auth = OAuthPlaintext(config)
        self.observer = observer or LoggingObserver()
        self.timeout = resolve_timeout(timeout if timeout is not None else Settings.REQUEST_TIMEOUT)

    def build_request(self, method: str, path: str) -> RequestDescriptor:
        """Resolve ``path`` against the base URL and sign it with a new header."""
        return RequestDescriptor(
            method=method,
            path=path,
            url=resolve_url(self.config.base_url, path),
            headers={"Authorization": self.auth.authorization_header()},
        )


class TradeMeClient(BaseClient):
    """Synchronous Trade Me API client."""

    def __init__(self, config: TradeMeConfig, observer: Optional[RequestObserver] = None,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """
        Initialize Trade Me API client.

        Args:
            config: Credentials and base URL
            observer: Receives a trace of each request (default: LoggingObserver)
            session: requests session to dispatch on
            timeout: Per-request timeout in seconds (default: transport default)
        """
        super().__init__(config, observer=observer, timeout=timeout)
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    def _execute(self, operation: str, method: str, path: str) -> ApiResponse:
        request = self.build_request(method, path)
        self.observer.request_sent(operation, request)
        try:
            raw = self.session.request(
                request.method, request.url, headers=request.headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            response = ApiResponse.from_error(e)
        else:
            response = ApiResponse.from_requests(raw)
        self.observer.response_received(operation, request, response)
        return response

    def get_listing(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        """
        Get a single listing.

        Args:
            listing_id: Listing ID
            format: Response format

        Returns:
            ApiResponse with the listing body
        """
        return self._execute("get_listing", "GET", listing_path(listing_id, format))

    def get_watchlist(self, filter: str = "", format: str = DEFAULT_FORMAT) -> ApiResponse:
        """
        Get the authenticated member's watchlist.

        Args:
            filter: Watchlist filter such as ``All`` or ``Current``; blank for none
            format: Response format

        Returns:
            ApiResponse with the watchlist body
        """
        return self._execute("get_watchlist", "GET", watchlist_path(filter, format))

    def add_to_watchlist(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        """Add a listing to the member's watchlist."""
        return self._execute("add_to_watchlist", "POST", watchlist_item_path(listing_id, format))

    def remove_from_watchlist(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        """Remove a listing from the member's watchlist."""
        return self._execute("remove_from_watchlist", "DELETE", watchlist_item_path(listing_id, format))
