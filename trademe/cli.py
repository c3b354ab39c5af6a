#!/usr/bin/env python3
"""
Trade Me sandbox command line.

Usage:
    python3 -m trademe listing <id>          # Show a listing
    python3 -m trademe watchlist [filter]    # Show the watchlist, optionally filtered
    python3 -m trademe add <id>              # Add a listing to the watchlist
    python3 -m trademe remove <id>           # Remove a listing from the watchlist
    python3 -m trademe smoke [id]            # Add, check, remove, check
"""
import argparse
import json
from typing import List, Optional

from .client import ApiResponse, TradeMeClient
from .config import Settings, TradeMeConfig, load_config
from .logger import configure_logging, logger
from .watchlist import WatchlistFilter, watchlist_contains


def print_response(response: ApiResponse):
    """Print status and body of a response."""
    if response.error is not None:
        print(f"✗ Transport error: {response.error}")
        return
    mark = "✓" if response.ok else "✗"
    print(f"{mark} {response.status_code} {response.reason}")
    if response.text:
        try:
            print(json.dumps(response.json(), indent=2))
        except ValueError:
            print(response.text)


def _check_watchlist(client: TradeMeClient, listing_id: str, expected: bool) -> bool:
    response = client.get_watchlist(WatchlistFilter.ALL.value)
    if not response.ok:
        print(f"✗ get_watchlist(All) returned {response.status_code}")
        return False
    try:
        present = watchlist_contains(response.json(), listing_id)
    except (ValueError, KeyError, TypeError) as e:
        logger.warning(f"Unreadable watchlist body: {e}")
        print(f"✗ get_watchlist(All) returned an unreadable body: {e}")
        return False
    state = "present" if present else "absent"
    if present == expected:
        print(f"✓ Listing {listing_id} {state} in watchlist")
        return True
    print(f"✗ Listing {listing_id} unexpectedly {state} in watchlist")
    return False


def run_smoke(client: TradeMeClient, listing_id: str) -> bool:
    """Add, confirm, remove, confirm. Returns True when every step held."""
    print(f"\nSmoke test against {client.config.base_url} with listing {listing_id}\n")

    response = client.add_to_watchlist(listing_id)
    if not response.ok:
        print(f"✗ add_to_watchlist returned {response.status_code}")
        return False
    print(f"✓ Added listing {listing_id}")
    added = _check_watchlist(client, listing_id, expected=True)

    response = client.remove_from_watchlist(listing_id)
    if not response.ok:
        print(f"✗ remove_from_watchlist returned {response.status_code}")
        return False
    print(f"✓ Removed listing {listing_id}")
    removed = _check_watchlist(client, listing_id, expected=False)
    return added and removed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Trade Me sandbox watchlist client')
    parser.add_argument('--config', default=None, help='Path to TradeMeConfig.json')
    parser.add_argument('--env', action='store_true', help='Read credentials from TRADEME_* variables')
    parser.add_argument('--log-level', default=None, help='Logging level (default: LOG_LEVEL)')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    listing_parser = subparsers.add_parser('listing', help='Show a listing')
    listing_parser.add_argument('listing_id', help='Listing ID')

    watchlist_parser = subparsers.add_parser('watchlist', help='Show the watchlist')
    watchlist_parser.add_argument('filter', nargs='?', default='',
                                  help=f"One of: {', '.join(f.value for f in WatchlistFilter)}")

    add_parser = subparsers.add_parser('add', help='Add a listing to the watchlist')
    add_parser.add_argument('listing_id', help='Listing ID')

    remove_parser = subparsers.add_parser('remove', help='Remove a listing from the watchlist')
    remove_parser.add_argument('listing_id', help='Listing ID')

    smoke_parser = subparsers.add_parser('smoke', help='Run the add/remove round trip')
    smoke_parser.add_argument('listing_id', nargs='?', default=Settings.TRADEME_TEST_LISTING_ID,
                              help='Listing ID')
    return parser


def _load(args) -> TradeMeConfig:
    if args.env:
        return TradeMeConfig.from_env()
    return load_config(args.config)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = _load(args)
    except (ValueError, OSError) as e:
        logger.error(f"Could not load credentials: {e}")
        print(f"✗ Error: {e}")
        return 2

    with TradeMeClient(config) as client:
        if args.command == 'smoke':
            return 0 if run_smoke(client, args.listing_id) else 1

        if args.command == 'listing':
            response = client.get_listing(args.listing_id)
        elif args.command == 'watchlist':
            response = client.get_watchlist(args.filter)
        elif args.command == 'add':
            response = client.add_to_watchlist(args.listing_id)
        else:
            response = client.remove_from_watchlist(args.listing_id)

    print_response(response)
    return 0 if response.ok else 1
