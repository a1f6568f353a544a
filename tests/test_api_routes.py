"""Webhook listener: delivery verification through the Webhooks resource."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import MockResponse, make_settings
from paypal_rest.api import routes
from paypal_rest.api.routes import build_paypal_client, get_paypal_client, get_settings, router
from paypal_rest.core.errors import TransportError
from paypal_rest.core.result import Err, Ok
from paypal_rest.models.schemas import WebhookTransmission

HEADERS = {
    "paypal-auth-algo": "SHA256withRSA",
    "paypal-cert-url": "https://api.sandbox.paypal.com/v1/notifications/certs/CERT-360caa42",
    "paypal-transmission-id": "dfb3be50-fd74-11e4-8bf3-77339302725b",
    "paypal-transmission-sig": "thy4/U002quzxFavHPwbfJGcc46E8rc5jzgyeafWm5mICTBdY",
    "paypal-transmission-time": "2015-05-12T18:14:14Z",
    "content-type": "application/json",
}

EVENT = {
    "id": "WH-2WR32451HC0233532-67976317FL4543714",
    "event_type": "PAYMENT.CAPTURE.COMPLETED",
    "resource": {"id": "42311647XV020574X", "status": "COMPLETED",
                 "supplementary_data": {"related_ids": {"order_id": "5O190127TN364715T"}}},
}


@pytest.fixture
def paypal():
    fake = MagicMock()
    fake.webhooks.verify_signature.return_value = Ok({"verification_status": "SUCCESS"})
    return fake


@pytest.fixture
def api(paypal):
    app = FastAPI()
    app.include_router(router, prefix="/v1")
    app.dependency_overrides[get_paypal_client] = lambda: paypal
    app.dependency_overrides[get_settings] = lambda: make_settings()
    return TestClient(app)


def test_health(api):
    resp = api.get("/v1/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_verified_delivery_is_acknowledged(api, paypal):
    resp = api.post("/v1/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "event_id": "WH-2WR32451HC0233532-67976317FL4543714",
        "event_type": "PAYMENT.CAPTURE.COMPLETED",
        "verification_status": "SUCCESS",
    }
    transmission, webhook_id, event = paypal.webhooks.verify_signature.call_args.args
    assert isinstance(transmission, WebhookTransmission)
    assert transmission.transmission_id == "dfb3be50-fd74-11e4-8bf3-77339302725b"
    assert webhook_id == "WH-TEST-1"
    assert event == EVENT


def test_rejected_signature_is_unauthorized(api, paypal):
    paypal.webhooks.verify_signature.return_value = Ok({"verification_status": "FAILURE"})

    resp = api.post("/v1/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)

    assert resp.status_code == 401


def test_verification_failure_is_bad_gateway(api, paypal):
    paypal.webhooks.verify_signature.return_value = Err(TransportError("connection refused"))

    resp = api.post("/v1/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)

    assert resp.status_code == 502


def test_invalid_json_is_rejected(api, paypal):
    resp = api.post("/v1/webhooks/paypal", content=b"not json", headers=HEADERS)

    assert resp.status_code == 400
    paypal.webhooks.verify_signature.assert_not_called()


def test_missing_transmission_headers_are_rejected(api, paypal):
    resp = api.post("/v1/webhooks/paypal", content=json.dumps(EVENT), headers={"content-type": "application/json"})

    assert resp.status_code == 400
    paypal.webhooks.verify_signature.assert_not_called()


def test_unconfigured_webhook_id_is_unavailable(api):
    api.app.dependency_overrides[get_settings] = lambda: make_settings(PAYPAL_WEBHOOK_ID=None)

    resp = api.post("/v1/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)

    assert resp.status_code == 503


def test_end_to_end_with_real_client(client, session):
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_paypal_client] = lambda: client
    app.dependency_overrides[get_settings] = lambda: make_settings()
    session.request.return_value = MockResponse(200, {"verification_status": "SUCCESS"})

    resp = TestClient(app).post("/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)

    assert resp.status_code == 200
    args, kwargs = session.request.call_args
    assert args == ("POST", "https://api-m.sandbox.paypal.com/v1/notifications/verify-webhook-signature")
    sent = json.loads(kwargs["data"])
    assert sent["webhook_id"] == "WH-TEST-1"
    assert sent["webhook_event"] == EVENT
    assert sent["auth_algo"] == "SHA256withRSA"


def test_missing_credentials_are_unavailable(monkeypatch):
    monkeypatch.setattr(routes, "settings", make_settings(PAYPAL_CLIENT_ID=None))
    build_paypal_client.cache_clear()
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_settings] = lambda: make_settings()

    try:
        resp = TestClient(app).post("/webhooks/paypal", content=json.dumps(EVENT), headers=HEADERS)
    finally:
        build_paypal_client.cache_clear()

    assert resp.status_code == 503
    assert resp.json() == {"detail": "PayPal credentials are not configured"}
