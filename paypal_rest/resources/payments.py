from typing import Any, List, Mapping, Optional

from paypal_rest.core.result import ApiResult
from paypal_rest.models.schemas import JSONDocument, JSONValue
from paypal_rest.resources.base import Endpoint, Resource


class Payments(Resource):
    """Payments v1 (``v1/payments/payment``), kept for integrations that predate Orders v2."""

    endpoints = {
        "create": Endpoint("POST", "v1/payments/payment"),
        "execute": Endpoint("POST", "v1/payments/payment/{payment_id}/execute"),
        "show": Endpoint("GET", "v1/payments/payment/{payment_id}"),
        "update": Endpoint("PATCH", "v1/payments/payment/{payment_id}"),
        "list": Endpoint("GET", "v1/payments/payment"),
    }

    def create(self, params: JSONDocument, request_id: Optional[str] = None) -> ApiResult:
        return self._call("create", body=params, request_id=request_id)

    def execute(self, payment_id: str, params: JSONDocument) -> ApiResult:
        return self._call("execute", body=params, payment_id=payment_id)

    def show(self, payment_id: str) -> ApiResult:
        return self._call("show", payment_id=payment_id)

    def update(self, payment_id: str, patch_ops: List[JSONValue]) -> ApiResult:
        return self._call("update", body=patch_ops, payment_id=payment_id)

    def list(self, query: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self._call("list", query=query)


class Authorizations(Resource):
    """Authorized payments v2: show, capture, reauthorize, void."""

    endpoints = {
        "show": Endpoint("GET", "v2/payments/authorizations/{authorization_id}"),
        "capture": Endpoint("POST", "v2/payments/authorizations/{authorization_id}/capture"),
        "reauthorize": Endpoint("POST", "v2/payments/authorizations/{authorization_id}/reauthorize"),
        "void": Endpoint("POST", "v2/payments/authorizations/{authorization_id}/void"),
    }

    def show(self, authorization_id: str) -> ApiResult:
        return self._call("show", authorization_id=authorization_id)

    def capture(self, authorization_id: str, params: Optional[JSONDocument] = None,
                request_id: Optional[str] = None) -> ApiResult:
        return self._call("capture", body=params or {}, request_id=request_id,
                          authorization_id=authorization_id)

    def reauthorize(self, authorization_id: str, params: Optional[JSONDocument] = None) -> ApiResult:
        return self._call("reauthorize", body=params or {}, authorization_id=authorization_id)

    def void(self, authorization_id: str) -> ApiResult:
        return self._call("void", authorization_id=authorization_id)


class Captures(Resource):
    endpoints = {
        "show": Endpoint("GET", "v2/payments/captures/{capture_id}"),
        "refund": Endpoint("POST", "v2/payments/captures/{capture_id}/refund"),
    }

    def show(self, capture_id: str) -> ApiResult:
        return self._call("show", capture_id=capture_id)

    def refund(self, capture_id: str, params: Optional[JSONDocument] = None,
               request_id: Optional[str] = None) -> ApiResult:
        """Refund a capture; omit ``params`` for a full refund."""
        return self._call("refund", body=params or {}, request_id=request_id, capture_id=capture_id)
