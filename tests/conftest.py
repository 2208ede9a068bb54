"""Test configuration and fixtures."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from paystack_client import PaystackClient, PaystackConfig

SECRET = "sk_test_123"


class MockResponse:
    """Minimal stand-in for ``requests.Response`` that records closing."""

    def __init__(self, status_code, json_data=None, text=None, content=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.content = text.encode("utf-8") if content is None else content
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return PaystackClient(PaystackConfig(secret=SECRET), session=session)


@pytest.fixture
def wire_client(monkeypatch):
    """A client on a real session whose ``send`` is mocked, so requests prepares the body."""
    real_session = requests.Session()
    send = MagicMock()
    monkeypatch.setattr(real_session, "send", send)
    yield PaystackClient(PaystackConfig(secret=SECRET), session=real_session), send
    real_session.close()


def respond(session, status_code=200, json_data=None, text=None, content=None):
    response = MockResponse(status_code, json_data=json_data, text=text, content=content)
    session.request.return_value = response
    return response


def sent_body(session):
    return session.request.call_args.kwargs["json"]
