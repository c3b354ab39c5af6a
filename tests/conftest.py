"""Shared fixtures for Trade Me client tests."""

import os

import pytest

from trademe.config import Settings, TradeMeConfig, load_config


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "sandbox: live calls against the Trade Me sandbox (needs TradeMeConfig.json)"
    )


@pytest.fixture
def config():
    return TradeMeConfig(
        consumer_key="test_key",
        consumer_secret="test_consumer_secret",
        access_token="test_token",
        token_secret="test_token_secret",
        base_url="https://api.example.test/v1/",
    )


@pytest.fixture(scope="module")
def sandbox_config():
    """Credentials for live tests. Skips the module when none are configured."""
    path = Settings.TRADEME_CONFIG_PATH
    if not os.path.exists(path):
        pytest.skip(f"No sandbox credentials at {path}")
    return load_config(path)
