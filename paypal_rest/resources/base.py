from typing import TYPE_CHECKING, Any, Dict, Mapping, NamedTuple, Optional
from urllib.parse import quote

from paypal_rest.core.result import ApiResult

if TYPE_CHECKING:
    from paypal_rest.integrations.paypal_client import PayPalClient


class Endpoint(NamedTuple):
    method: str
    path: str  # template, e.g. "v2/checkout/orders/{order_id}"

    def render(self, **ids: str) -> str:
        return self.path.format(**{k: quote(str(v), safe="") for k, v in ids.items()})


class Resource:
    """Binds a table of PayPal endpoints to a client.

    Subclasses declare ``endpoints`` and one thin method per entry; caller
    params are sent as the JSON body without validation.
    """

    endpoints: Dict[str, Endpoint] = {}

    def __init__(self, client: "PayPalClient"):
        self._client = client

    def _call(self,
              action: str,
              body: Any = None,
              query: Optional[Mapping[str, Any]] = None,
              request_id: Optional[str] = None,
              **ids: str) -> ApiResult:
        endpoint = self.endpoints[action]
        headers = {"PayPal-Request-Id": request_id} if request_id else None
        return self._client.request(endpoint.method, endpoint.render(**ids),
                                    body=body, params=query, headers=headers)
