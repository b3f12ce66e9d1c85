"""
Pytest configuration and shared fixtures for the jawab server tests.
"""
import json
import os
import sys

import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings  # noqa: E402
from hf_connector import HFConnector  # noqa: E402

TRANSLATION_URL = "https://hf.test/translate"
TABLE_QA_URL = "https://hf.test/tapas"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True
        return False


class FakeSession:
    """Stands in for requests.Session; maps URL -> FakeResponse (or an exception to raise)."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.responses = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({
            "url": url,
            "json": json,
            "headers": headers,
            "timeout": timeout,
        })
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        self.responses.append(route)
        return route

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


@pytest.fixture
def settings():
    return Settings(
        token="test-token",
        translation_url=TRANSLATION_URL,
        table_qa_url=TABLE_QA_URL,
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def connector(settings, fake_session):
    return HFConnector(settings, session=fake_session)


@pytest.fixture
def test_client(settings, connector):
    from main import create_app

    app = create_app(settings, connector)
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
