"""
Watchlist Helpers
Interpret listing and watchlist bodies on behalf of callers.
"""

from enum import Enum
from typing import Any, Dict, List


class WatchlistFilter(str, Enum):
    """Watchlist views the service accepts."""

    ALL = "All"
    CURRENT = "Current"
    WON = "Won"
    LOST = "Lost"
    DELETED = "Deleted"
    CLOSING_TODAY = "ClosingToday"
    LEADING_BIDS = "LeadingBids"
    RESERVE_MET = "ReserveMet"
    RESERVE_NOT_MET = "ReserveNotMet"
    OPEN_HOMES = "OpenHomes"

    def __str__(self) -> str:
        return self.value


def listing_id_of(payload: Dict[str, Any]) -> int:
    """
    Get the id from a listing body.

    Args:
        payload: Decoded listing JSON

    Returns:
        ListingId as int
    """
    return int(payload["ListingId"])


def watchlist_listing_ids(payload: Dict[str, Any]) -> List[int]:
    """
    Get the listing ids in a watchlist body.

    Args:
        payload: Decoded watchlist JSON with a ``List`` array

    Returns:
        ListingId of every entry, in order
    """
    return [int(item["ListingId"]) for item in payload["List"]]


def watchlist_contains(payload: Dict[str, Any], listing_id) -> bool:
    return str(listing_id) in {str(i) for i in watchlist_listing_ids(payload)}
