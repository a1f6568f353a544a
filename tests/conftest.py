"""Test configuration and fixtures."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from paypal_rest.core.config import Settings
from paypal_rest.integrations.paypal_client import PayPalClient


class MockResponse:
    """Stand-in for requests.Response carrying only what the client reads."""

    def __init__(self, status_code, json_data=None, text=None, headers=None, content=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        self.content = content if content is not None else text.encode("utf-8")
        self.headers = headers or {}

    def json(self):
        # decoded from the raw bytes, like requests
        return json.loads(self.content)


def token_response(access_token="A21AAFtoken", expires_in=32400):
    return MockResponse(
        200,
        {
            "scope": "https://uri.paypal.com/services/payments/payment",
            "access_token": access_token,
            "token_type": "Bearer",
            "app_id": "APP-80W284485P519543T",
            "expires_in": expires_in,
            "nonce": "2020-04-03T15:35:36ZaYZlGvEkV4yVSz8g6bAKFoGSEzuy3CQcz3ljhibkOHg",
        },
    )


def make_settings(**overrides):
    values = {
        "PAYPAL_CLIENT_ID": "client-id",
        "PAYPAL_CLIENT_SECRET": "client-secret",
        "PAYPAL_ENVIRONMENT": "sandbox",
        "PAYPAL_BASE_URL": None,
        "PAYPAL_TOKEN_LEEWAY_SECONDS": 0,
        "PAYPAL_REFRESH_ON_UNAUTHORIZED": False,
        "PAYPAL_WEBHOOK_ID": "WH-TEST-1",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def config():
    return make_settings()


@pytest.fixture
def session():
    """requests.Session double: ``post`` serves the OAuth endpoint, ``request`` the API."""
    s = MagicMock(spec=requests.Session)
    s.post.return_value = token_response()
    return s


@pytest.fixture
def client(config, session):
    return PayPalClient(session=session, config=config)
