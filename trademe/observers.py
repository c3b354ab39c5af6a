"""
Request Observers
Pluggable sinks that receive a trace of every request the clients send.
"""

import logging
from typing import List, Optional, Tuple

from .auth import redact_authorization
from .logger import get_logger


class RequestObserver:
    """Base observer. Both hooks are no-ops, so subclasses override what they need."""

    def request_sent(self, operation: str, request) -> None:
        """
        Called before a request is dispatched.

        Args:
            operation: Client method name, e.g. ``get_watchlist``
            request: RequestDescriptor about to be sent
        """

    def response_received(self, operation: str, request, response) -> None:
        """
        Called once the transport returns or fails.

        Args:
            operation: Client method name
            request: RequestDescriptor that was sent
            response: ApiResponse, with ``error`` set on transport failure
        """


class LoggingObserver(RequestObserver):
    """Write the request/response trace to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger('http')

    def request_sent(self, operation, request):
        lines = [f"{operation}", f"Making {request.method} request to: {request.url}", "Headers:"]
        for name, value in request.headers.items():
            if name.lower() == "authorization":
                value = redact_authorization(value)
            lines.append(f"  {name}: {value}")
        self.logger.debug("\n".join(lines))

    def response_received(self, operation, request, response):
        lines = [
            f"{operation} Response",
            f"Status Code: {response.status_code}",
            f"Status Description: {response.reason}",
        ]
        if response.error is not None:
            lines.append(f"Error: {response.error}")
        if response.text:
            lines.append("Response Content:")
            lines.append(response.text)
        level = logging.WARNING if response.error is not None else logging.DEBUG
        self.logger.log(level, "\n".join(lines))


class RecordingObserver(RequestObserver):
    """Keep every exchange in memory."""

    def __init__(self):
        self.requests: List[Tuple[str, object]] = []
        self.responses: List[Tuple[str, object, object]] = []

    def request_sent(self, operation, request):
        self.requests.append((operation, request))

    def response_received(self, operation, request, response):
        self.responses.append((operation, request, response))

    def clear(self):
        self.requests.clear()
        self.responses.clear()
