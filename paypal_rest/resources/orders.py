from typing import List, Optional

from paypal_rest.core.result import ApiResult
from paypal_rest.models.schemas import JSONDocument, JSONValue
from paypal_rest.resources.base import Endpoint, Resource


class Orders(Resource):
    """Orders v2: https://developer.paypal.com/docs/api/orders/v2/

    Usage::

        >>> client.orders.create({"intent": "CAPTURE", "purchase_units": [...]})
        >>> client.orders.show("5O190127TN364715T")
        >>> client.orders.capture("5O190127TN364715T")
    """

    endpoints = {
        "create": Endpoint("POST", "v2/checkout/orders"),
        "show": Endpoint("GET", "v2/checkout/orders/{order_id}"),
        "update": Endpoint("PATCH", "v2/checkout/orders/{order_id}"),
        "authorize": Endpoint("POST", "v2/checkout/orders/{order_id}/authorize"),
        "capture": Endpoint("POST", "v2/checkout/orders/{order_id}/capture"),
    }

    def create(self, params: JSONDocument, request_id: Optional[str] = None) -> ApiResult:
        return self._call("create", body=params, request_id=request_id)

    def show(self, order_id: str) -> ApiResult:
        return self._call("show", order_id=order_id)

    def update(self, order_id: str, patch_ops: List[JSONValue]) -> ApiResult:
        # PayPal answers a successful PATCH with 204, which becomes Ok({})
        return self._call("update", body=patch_ops, order_id=order_id)

    def authorize(self, order_id: str, params: Optional[JSONDocument] = None,
                  request_id: Optional[str] = None) -> ApiResult:
        return self._call("authorize", body=params or {}, request_id=request_id, order_id=order_id)

    def capture(self, order_id: str, params: Optional[JSONDocument] = None,
                request_id: Optional[str] = None) -> ApiResult:
        return self._call("capture", body=params or {}, request_id=request_id, order_id=order_id)
