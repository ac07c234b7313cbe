"""Shared test fixtures."""

import hashlib
import hmac
import os
import time
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

TEST_SIGNING_SECRET = "test_signing_secret_1234"

# Settings are cached on first use, so the environment must be set before the app loads
os.environ.setdefault("SLACK_SIGNING_SECRET", TEST_SIGNING_SECRET)
os.environ.setdefault("SLACK_BOT_TOKEN", "xoxb-test")
os.environ.setdefault("NOTION_API_KEY", "secret_test")

from notion_unfurl.app import app  # noqa: E402


def _sign_request(body: bytes, secret: str = TEST_SIGNING_SECRET) -> dict:
    """Generate Slack-compatible signature headers for ``body``."""
    timestamp = str(int(time.time()))
    sig_basestring = f"v0:{timestamp}:{body.decode()}"
    signature = "v0=" + hmac.new(
        secret.encode(), sig_basestring.encode(), hashlib.sha256
    ).hexdigest()
    return {
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": signature,
        "Content-Type": "application/json",
    }


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sign_request() -> Callable[..., dict]:
    """Return a helper that builds signed Slack headers for a body."""
    return _sign_request


@pytest.fixture
def signing_secret() -> str:
    """The signing secret the test app is configured with."""
    return TEST_SIGNING_SECRET
