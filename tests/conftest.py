"""Pytest shared fixtures for the Access Control client tests."""
import json
import os
import pathlib
import sys
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from access_control import AccessControlClient


TEST_TOKEN = "Bearer test-token"
TEST_ITWIN_ID = "itwin-1234"
TEST_BASE_URL = "https://api.example.test/accesscontrol/itwins"


# ─────────────────────────────────────────────────────────────────────────────
# Stub HTTP layer
# ─────────────────────────────────────────────────────────────────────────────
class StubResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        headers: Optional[dict] = None,
        text: Optional[str] = None,
    ):
        self.status_code = status_code
        self.headers = headers or {"Content-Type": "application/json"}
        if text is not None:
            self.text = text
        elif payload is not None:
            self.text = json.dumps(payload)
        else:
            self.text = ""
        self.content = self.text.encode()

    def json(self):
        return json.loads(self.text)


class RecordingSession:
    """Fake ``requests.Session`` returning queued responses and recording calls.

    Queue ``StubResponse`` objects (or exceptions to raise) with ``queue()``.
    """

    def __init__(self):
        self.calls: list[dict] = []
        self._responses: list = []
        self.closed = False

    def queue(self, *responses):
        self._responses.extend(responses)
        return self

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if not self._responses:
            raise AssertionError(f"Unexpected HTTP {kwargs.get('method')} {kwargs.get('url')}")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last_call(self) -> dict:
        return self.calls[-1]


@pytest.fixture()
def session():
    """Recording session with an empty response queue."""
    return RecordingSession()


@pytest.fixture()
def client(session):
    """AccessControlClient wired to the recording session."""
    return AccessControlClient(TEST_BASE_URL, session=session)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_real_requests(monkeypatch, request):
    """
    Prevent unit tests from reaching the network through a default session.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _blocked(self, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected network access in unit test: {method} {url}")

    monkeypatch.setattr(requests.Session, "request", _blocked)


# ─────────────────────────────────────────────────────────────────────────────
# Live service
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(scope="session")
def live_config():
    """Credentials for integration tests, skipped when not configured."""
    token = os.environ.get("ACCESS_CONTROL_TOKEN")
    itwin_id = os.environ.get("ITWIN_ID")
    if not token or not itwin_id:
        pytest.skip("ACCESS_CONTROL_TOKEN and ITWIN_ID are required for integration tests")
    return {"token": token, "itwin_id": itwin_id}
