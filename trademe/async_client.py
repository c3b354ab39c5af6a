"""
Async Trade Me API Client
The same operations as TradeMeClient, as coroutines on top of aiohttp.
"""

import asyncio
import time
from typing import Optional

import aiohttp

from .client import (
    DEFAULT_FORMAT,
    ApiResponse,
    BaseClient,
    listing_path,
    watchlist_item_path,
    watchlist_path,
)
from .config import TradeMeConfig
from .observers import RequestObserver


def _decode(body: bytes, charset: Optional[str]) -> str:
    """Decode a body, replacing bytes that are invalid in its charset."""
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class AsyncTradeMeClient(BaseClient):
    """Asynchronous Trade Me API client."""

    def __init__(self, config: TradeMeConfig, observer: Optional[RequestObserver] = None,
                 session: Optional[aiohttp.ClientSession] = None, timeout: Optional[float] = None):
        super().__init__(config, observer=observer, timeout=timeout)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self):
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def _execute(self, operation: str, method: str, path: str) -> ApiResponse:
        request = self.build_request(method, path)
        self.observer.request_sent(operation, request)

        kwargs = {"headers": request.headers}
        if self.timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        started = time.monotonic()
        try:
            async with self._get_session().request(request.method, request.url, **kwargs) as resp:
                body = await resp.read()
                text = _decode(body, resp.charset)
                response = ApiResponse(
                    status_code=resp.status,
                    reason=resp.reason or "",
                    text=text,
                    headers=dict(resp.headers),
                    elapsed=time.monotonic() - started,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            response = ApiResponse.from_error(e)
        self.observer.response_received(operation, request, response)
        return response

    async def get_listing(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        return await self._execute("get_listing", "GET", listing_path(listing_id, format))

    async def get_watchlist(self, filter: str = "", format: str = DEFAULT_FORMAT) -> ApiResponse:
        return await self._execute("get_watchlist", "GET", watchlist_path(filter, format))

    async def add_to_watchlist(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        return await self._execute("add_to_watchlist", "POST", watchlist_item_path(listing_id, format))

    async def remove_from_watchlist(self, listing_id: str, format: str = DEFAULT_FORMAT) -> ApiResponse:
        return await self._execute("remove_from_watchlist", "DELETE", watchlist_item_path(listing_id, format))
