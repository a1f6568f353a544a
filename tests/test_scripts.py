"""scripts/paypal_refresh_token.py"""

import importlib.util
from pathlib import Path

import pytest

from conftest import MockResponse, make_settings
from paypal_rest.integrations.paypal_client import PayPalClient

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "paypal_refresh_token.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("paypal_refresh_token", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_prints_masked_token(script, session, monkeypatch, capsys):
    monkeypatch.setattr(script, "PayPalClient", lambda: PayPalClient(session=session, config=make_settings()))

    assert script.main() == 0

    out = capsys.readouterr().out
    assert "A21AAF..." in out
    assert "A21AAFtoken" not in out
    session.post.assert_called_once()


def test_reports_failure(script, session, monkeypatch, capsys):
    session.post.return_value = MockResponse(401, {"error": "invalid_client"})
    monkeypatch.setattr(script, "PayPalClient", lambda: PayPalClient(session=session, config=make_settings()))

    assert script.main() == 1
    assert "AuthError" in capsys.readouterr().err
