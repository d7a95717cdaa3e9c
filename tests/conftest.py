"""
Shared fixtures for schedulesdirect tests
"""
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from schedulesdirect import ClientConfig, SchedulesDirectClient
from schedulesdirect.session import TokenSession
from schedulesdirect.transport import Transport

TEST_TOKEN = "d97c908ed44c25fdca302612c70584c8d5acd47a"
NEW_TOKEN = "f3fca79989cafe7dead71beefedc812b"


def make_response(body=b"", status_code=200, headers=None):
    """Build a mock requests.Response carrying ``body`` (dicts/lists are JSON-encoded)"""
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")

    response = MagicMock()
    response.status_code = status_code
    response.content = body
    response.headers = headers or {}
    return response


def token_response(token=NEW_TOKEN, issued_at=None):
    issued_at = issued_at or datetime.now(timezone.utc)
    return make_response(
        {
            "code": 0,
            "message": "OK",
            "serverID": "20141201.web.1",
            "datetime": issued_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "token": token,
        }
    )


def error_envelope(code, message="", status_code=200, response="ERROR"):
    return make_response(
        {
            "response": response,
            "code": code,
            "serverID": "20141201.web.1",
            "message": message,
            "datetime": "2016-08-23T13:55:25Z",
        },
        status_code=status_code,
    )


def request_bodies(mock_request):
    """Decoded JSON bodies of every call made through a patched Session.request"""
    return [json.loads(c.kwargs["data"]) for c in mock_request.call_args_list]


def request_urls(mock_request):
    return [c.args[1] for c in mock_request.call_args_list]


@pytest.fixture
def config():
    return ClientConfig(base_url="https://sd.example.test/")


@pytest.fixture
def session():
    """A session holding a token that is good for another hour"""
    token_session = TokenSession("testuser", "testpassword")
    token_session.update(TEST_TOKEN, datetime.now(timezone.utc) - timedelta(hours=23))
    return token_session


@pytest.fixture
def transport(config, session):
    engine = Transport(config, session)
    yield engine
    engine.close()


@pytest.fixture
def client(config, session):
    sd = SchedulesDirectClient("testuser", "testpassword", config=config, auto_authenticate=False)
    sd.session.update(session.token, session.token_expiry - TokenSession.TOKEN_LIFETIME)
    yield sd
    sd.close()


@pytest.fixture
def legacy_client(session):
    sd = SchedulesDirectClient(
        "testuser",
        "testpassword",
        config=ClientConfig(base_url="https://sd.example.test/", api_version="20140530"),
        auto_authenticate=False,
    )
    sd.session.update(session.token, session.token_expiry - TokenSession.TOKEN_LIFETIME)
    yield sd
    sd.close()
