"""Tests for watchlist response helpers."""

import json

import pytest

from trademe.client import watchlist_path
from trademe.watchlist import (
    WatchlistFilter,
    listing_id_of,
    watchlist_contains,
    watchlist_listing_ids,
)
from tests.fixtures import EMPTY_WATCHLIST_BODY, LISTING_BODY, LISTING_ID, WATCHLIST_BODY


def test_filter_values():
    assert [f.value for f in WatchlistFilter] == [
        "All", "Current", "Won", "Lost", "Deleted",
        "ClosingToday", "LeadingBids", "ReserveMet", "ReserveNotMet", "OpenHomes",
    ]


def test_filter_usable_as_path_segment():
    assert watchlist_path(WatchlistFilter.RESERVE_MET.value) == "mytrademe/watchList/ReserveMet.json"
    assert str(WatchlistFilter.OPEN_HOMES) == "OpenHomes"


def test_listing_id_of():
    assert listing_id_of(json.loads(LISTING_BODY)) == LISTING_ID


def test_watchlist_listing_ids():
    assert watchlist_listing_ids(json.loads(WATCHLIST_BODY)) == [LISTING_ID, 2149712754]
    assert watchlist_listing_ids(json.loads(EMPTY_WATCHLIST_BODY)) == []


def test_watchlist_contains_compares_as_strings():
    payload = json.loads(WATCHLIST_BODY)
    assert watchlist_contains(payload, "2149713054")
    assert watchlist_contains(payload, LISTING_ID)
    assert not watchlist_contains(payload, "1")


def test_malformed_watchlist_raises():
    with pytest.raises(KeyError):
        watchlist_listing_ids({"Items": []})
