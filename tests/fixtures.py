"""Canned responses for offline tests."""

import json

import requests

LISTING_ID = 2149713054

LISTING_BODY = json.dumps({"ListingId": LISTING_ID, "Title": "Sandbox test listing"})

WATCHLIST_BODY = json.dumps({
    "TotalCount": 2,
    "Page": 1,
    "PageSize": 50,
    "List": [
        {"ListingId": LISTING_ID, "Title": "Sandbox test listing"},
        {"ListingId": 2149712754, "Title": "Another listing"},
    ],
})

EMPTY_WATCHLIST_BODY = json.dumps({"TotalCount": 0, "Page": 1, "PageSize": 50, "List": []})


def make_response(status_code: int = 200, body: str = "", reason: str = "OK") -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response
