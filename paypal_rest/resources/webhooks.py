from typing import Any, List, Mapping, Optional, Union

from paypal_rest.core.result import ApiResult
from paypal_rest.models.schemas import JSONDocument, JSONValue, WebhookTransmission
from paypal_rest.resources.base import Endpoint, Resource


class Webhooks(Resource):
    """Webhook subscriptions and signature verification (``v1/notifications``).

    Usage::

        >>> client.webhooks.create({"url": "https://example.com/hook", "event_types": [{"name": "*"}]})
        >>> client.webhooks.verify_signature(request.headers, webhook_id, event)
    """

    endpoints = {
        "create": Endpoint("POST", "v1/notifications/webhooks"),
        "list": Endpoint("GET", "v1/notifications/webhooks"),
        "show": Endpoint("GET", "v1/notifications/webhooks/{webhook_id}"),
        "update": Endpoint("PATCH", "v1/notifications/webhooks/{webhook_id}"),
        "delete": Endpoint("DELETE", "v1/notifications/webhooks/{webhook_id}"),
        "list_event_subscriptions": Endpoint("GET", "v1/notifications/webhooks/{webhook_id}/event-types"),
        "list_event_types": Endpoint("GET", "v1/notifications/webhooks-event-types"),
        "verify_signature": Endpoint("POST", "v1/notifications/verify-webhook-signature"),
        "simulate_event": Endpoint("POST", "v1/notifications/simulate-event"),
    }

    def create(self, params: JSONDocument) -> ApiResult:
        return self._call("create", body=params)

    def list(self, query: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self._call("list", query=query)

    def show(self, webhook_id: str) -> ApiResult:
        return self._call("show", webhook_id=webhook_id)

    def update(self, webhook_id: str, patch_ops: List[JSONValue]) -> ApiResult:
        return self._call("update", body=patch_ops, webhook_id=webhook_id)

    def delete(self, webhook_id: str) -> ApiResult:
        return self._call("delete", webhook_id=webhook_id)

    def list_event_subscriptions(self, webhook_id: str) -> ApiResult:
        return self._call("list_event_subscriptions", webhook_id=webhook_id)

    def list_event_types(self) -> ApiResult:
        return self._call("list_event_types")

    def verify_signature(self,
                         transmission: Union[WebhookTransmission, Mapping[str, Any]],
                         webhook_id: str,
                         event: JSONDocument) -> ApiResult:
        """Ask PayPal to verify a delivery.

        ``transmission`` is either a parsed ``WebhookTransmission`` or the raw
        request headers. The result's ``verification_status`` is ``SUCCESS``
        or ``FAILURE``.
        """
        if not isinstance(transmission, WebhookTransmission):
            transmission = WebhookTransmission.from_headers(transmission)
        body = transmission.model_dump()
        body["webhook_id"] = webhook_id
        body["webhook_event"] = event
        return self._call("verify_signature", body=body)

    def simulate_event(self, params: JSONDocument) -> ApiResult:
        return self._call("simulate_event", body=params)


class WebhookEvents(Resource):
    endpoints = {
        "list": Endpoint("GET", "v1/notifications/webhooks-events"),
        "show": Endpoint("GET", "v1/notifications/webhooks-events/{event_id}"),
        "resend": Endpoint("POST", "v1/notifications/webhooks-events/{event_id}/resend"),
    }

    def list(self, query: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self._call("list", query=query)

    def show(self, event_id: str) -> ApiResult:
        return self._call("show", event_id=event_id)

    def resend(self, event_id: str, webhook_ids: Optional[List[str]] = None) -> ApiResult:
        body = {"webhook_ids": webhook_ids} if webhook_ids else {}
        return self._call("resend", body=body, event_id=event_id)
