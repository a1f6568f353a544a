import asyncio
import json
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from paypal_rest.core.config import Settings, settings
from paypal_rest.core.errors import ConfigError
from paypal_rest.core.result import Err
from paypal_rest.integrations.paypal_client import PayPalClient
from paypal_rest.models.schemas import WebhookAck, WebhookTransmission

log = structlog.get_logger(__name__)

router = APIRouter()


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def build_paypal_client() -> PayPalClient:
    return PayPalClient(config=settings)


def get_paypal_client() -> PayPalClient:
    try:
        return build_paypal_client()
    except ConfigError as e:
        log.error("paypal.webhook.client_unavailable", error=str(e))
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="PayPal credentials are not configured")


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/webhooks/paypal", response_model=WebhookAck)
async def paypal_webhook(request: Request,
                         client: PayPalClient = Depends(get_paypal_client),
                         config: Settings = Depends(get_settings)):
    if not config.paypal_webhook_id:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="PAYPAL_WEBHOOK_ID is not configured")

    raw = await request.body()
    try:
        event = json.loads(raw.decode("utf-8")) if raw else None
    except (UnicodeDecodeError, ValueError):
        event = None
    if not isinstance(event, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Webhook body must be a JSON object")

    try:
        transmission = WebhookTransmission.from_headers(request.headers)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing PayPal transmission headers")

    event_type = event.get("event_type")
    log.info("paypal.webhook.received", event_id=event.get("id"), event_type=event_type,
             transmission_id=transmission.transmission_id)

    # The client blocks on requests; keep it off the event loop
    result = await asyncio.to_thread(client.webhooks.verify_signature, transmission, config.paypal_webhook_id, event)
    if isinstance(result, Err):
        log.warning("paypal.webhook.verify_failed", error=repr(result.reason))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Webhook verification unavailable")

    verification_status = result.value.get("verification_status")
    if verification_status != "SUCCESS":
        log.warning("paypal.webhook.rejected", event_id=event.get("id"), verification_status=verification_status)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Webhook signature rejected")

    return WebhookAck(event_id=event.get("id"), event_type=event_type, verification_status=verification_status)
