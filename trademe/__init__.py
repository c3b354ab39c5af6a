"""
trademe - Trade Me sandbox API client
Listing lookup and watchlist management with OAuth 1.0 PLAINTEXT signing.
"""

__version__ = "0.1.0"

from .async_client import AsyncTradeMeClient
from .auth import OAuthPlaintext
from .client import ApiResponse, RequestDescriptor, TradeMeClient
from .config import TradeMeConfig, load_config
from .observers import LoggingObserver, RecordingObserver, RequestObserver
from .watchlist import WatchlistFilter

__all__ = [
    "TradeMeClient",
    "AsyncTradeMeClient",
    "ApiResponse",
    "RequestDescriptor",
    "OAuthPlaintext",
    "TradeMeConfig",
    "load_config",
    "RequestObserver",
    "LoggingObserver",
    "RecordingObserver",
    "WatchlistFilter",
]
