"""Tests for request observers."""

import logging

import requests

from trademe.client import ApiResponse, RequestDescriptor
from trademe.observers import LoggingObserver, RecordingObserver, RequestObserver

HEADER = ('OAuth oauth_consumer_key="test_key", oauth_nonce="n", '
          'oauth_signature="test_consumer_secret%26test_token_secret", '
          'oauth_signature_method="PLAINTEXT", oauth_timestamp="1", '
          'oauth_token="test_token", oauth_version="1.0"')


def _request():
    return RequestDescriptor(
        method="GET",
        path="mytrademe/watchList/All.json",
        url="https://api.example.test/v1/mytrademe/watchList/All.json",
        headers={"Authorization": HEADER, "Accept": "application/json"},
    )


def test_base_observer_is_noop():
    observer = RequestObserver()
    observer.request_sent("get_watchlist", _request())
    observer.response_received("get_watchlist", _request(), ApiResponse(status_code=200))


def test_logging_observer_redacts_authorization(caplog):
    observer = LoggingObserver(logging.getLogger("trademe.test"))
    with caplog.at_level(logging.DEBUG, logger="trademe.test"):
        observer.request_sent("get_watchlist", _request())

    text = caplog.text
    assert "Making GET request to: https://api.example.test/v1/mytrademe/watchList/All.json" in text
    assert 'Authorization: OAuth oauth_consumer_key="test_key"...' in text
    assert "Accept: application/json" in text
    assert "test_consumer_secret" not in text
    assert "oauth_nonce" not in text


def test_logging_observer_logs_response(caplog):
    observer = LoggingObserver(logging.getLogger("trademe.test"))
    response = ApiResponse(status_code=200, reason="OK", text='{"List": []}')
    with caplog.at_level(logging.DEBUG, logger="trademe.test"):
        observer.response_received("get_watchlist", _request(), response)

    assert "get_watchlist Response" in caplog.text
    assert "Status Code: 200" in caplog.text
    assert "Status Description: OK" in caplog.text
    assert '{"List": []}' in caplog.text


def test_logging_observer_warns_on_transport_error(caplog):
    observer = LoggingObserver(logging.getLogger("trademe.test"))
    response = ApiResponse.from_error(requests.Timeout("read timed out"))
    with caplog.at_level(logging.DEBUG, logger="trademe.test"):
        observer.response_received("get_listing", _request(), response)

    record, = caplog.records
    assert record.levelno == logging.WARNING
    assert "Error: read timed out" in record.getMessage()


def test_recording_observer_keeps_events():
    observer = RecordingObserver()
    request = _request()
    response = ApiResponse(status_code=401, reason="Unauthorized")

    observer.request_sent("get_watchlist", request)
    observer.response_received("get_watchlist", request, response)

    assert observer.requests == [("get_watchlist", request)]
    assert observer.responses == [("get_watchlist", request, response)]

    observer.clear()
    assert observer.requests == []
    assert observer.responses == []
