from paypal_rest.core.result import ApiResult
from paypal_rest.resources.base import Endpoint, Resource


class Refunds(Resource):
    """Refund lookups; refunds themselves are issued through ``Captures.refund``."""

    endpoints = {
        "show": Endpoint("GET", "v2/payments/refunds/{refund_id}"),
    }

    def show(self, refund_id: str) -> ApiResult:
        return self._call("show", refund_id=refund_id)
