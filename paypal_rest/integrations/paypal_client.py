import json
import platform
import time
from typing import Any, Dict, Mapping, Optional

import requests
import structlog
from pydantic import BaseModel

from paypal_rest.core.config import Settings, settings
from paypal_rest.core.errors import ApiError, DecodeError, TransportError, UnauthorizedError
from paypal_rest.core.result import ApiResult, Err, Ok
from paypal_rest.integrations.token_cache import TokenCache
from paypal_rest.models.schemas import Credentials, JSONDocument
from paypal_rest.resources.orders import Orders
from paypal_rest.resources.payments import Authorizations, Captures, Payments
from paypal_rest.resources.refunds import Refunds
from paypal_rest.resources.webhooks import WebhookEvents, Webhooks

log = structlog.get_logger(__name__)

__version__ = "0.1.0"

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "DELETE")
USER_AGENT = "paypal-rest/%s (requests %s; python %s)" % (
    __version__, requests.__version__, platform.python_version())


class PayPalClient:
    """PayPal REST API client: one OAuth token cell plus an authenticated request executor.

    Every call returns ``Ok(document)`` or ``Err(reason)``; expected failures
    (auth, transport, HTTP status, bad JSON) are never raised.

    Usage::

        client = PayPalClient(client_id="...", client_secret="...", environment="sandbox")
        result = client.orders.show("5O190127TN364715T")
        if result.is_ok:
            print(result.value["status"])
    """

    def __init__(self,
                 client_id: Optional[str] = None,
                 client_secret: Optional[str] = None,
                 environment: Optional[str] = None,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 refresh_on_unauthorized: Optional[bool] = None,
                 session: Optional[requests.Session] = None,
                 config: Optional[Settings] = None):
        config = config or settings
        self.credentials = Credentials.build(
            client_id or config.paypal_client_id,
            client_secret or config.paypal_client_secret,
            environment or config.paypal_environment,
        )
        self.base_url = (base_url or config.paypal_base_url or self.credentials.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.paypal_timeout_seconds
        self.refresh_on_unauthorized = (refresh_on_unauthorized if refresh_on_unauthorized is not None
                                        else config.paypal_refresh_on_unauthorized)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.tokens = TokenCache(self.credentials, self.session, base_url=self.base_url,
                                 timeout=self.timeout, leeway=config.paypal_token_leeway_seconds)

        self.orders = Orders(self)
        self.payments = Payments(self)
        self.authorizations = Authorizations(self)
        self.captures = Captures(self)
        self.refunds = Refunds(self)
        self.webhooks = Webhooks(self)
        self.webhook_events = WebhookEvents(self)

    def get_access_token(self, force_refresh: bool = False) -> ApiResult[str]:
        return self.tokens.get_token(force_refresh=force_refresh)

    # --- request executor ---
    def request(self,
                method: str,
                path: str,
                body: Any = None,
                params: Optional[Mapping[str, Any]] = None,
                headers: Optional[Mapping[str, str]] = None) -> ApiResult[JSONDocument]:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        result = self._send(method, path, body, params, headers)
        if self.refresh_on_unauthorized and isinstance(result, Err) and isinstance(result.reason, UnauthorizedError):
            log.info("paypal.token.retry_after_401", method=method, path=path)
            self.tokens.invalidate()
            result = self._send(method, path, body, params, headers)
        return result

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None,
            headers: Optional[Mapping[str, str]] = None) -> ApiResult[JSONDocument]:
        return self.request("GET", path, params=params, headers=headers)

    def post(self, path: str, body: Any = None,
             headers: Optional[Mapping[str, str]] = None) -> ApiResult[JSONDocument]:
        return self.request("POST", path, body=body, headers=headers)

    def patch(self, path: str, body: Any = None,
              headers: Optional[Mapping[str, str]] = None) -> ApiResult[JSONDocument]:
        return self.request("PATCH", path, body=body, headers=headers)

    def delete(self, path: str, headers: Optional[Mapping[str, str]] = None) -> ApiResult[JSONDocument]:
        return self.request("DELETE", path, headers=headers)

    def _send(self, method, path, body, params, headers) -> ApiResult[JSONDocument]:
        token = self.tokens.get_token()
        if isinstance(token, Err):
            return token

        url = f"{self.base_url}/{path.lstrip('/')}"
        http_headers = self._headers(token.value)
        if headers:
            http_headers.update(headers)
        data = json.dumps(_to_document(body)) if body is not None else None

        log.debug("paypal.request", method=method, path=path)
        started = time.monotonic()
        try:
            resp = self.session.request(method, url, data=data, params=params,
                                        headers=http_headers, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("paypal.transport_error", method=method, path=path, error=repr(e))
            return Err(TransportError(f"PayPal request {method} {path} failed: {e}", original=e))

        log.info("paypal.response",
                 method=method,
                 path=path,
                 status=resp.status_code,
                 duration_ms=round((time.monotonic() - started) * 1000, 1),
                 debug_id=resp.headers.get("PayPal-Debug-Id"))
        return handle_response(resp)

    @staticmethod
    def _headers(access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    # --- lifecycle ---
    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PayPalClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def handle_response(resp: requests.Response) -> ApiResult[JSONDocument]:
    """Normalize an HTTP response into ``Ok``/``Err``."""
    status = resp.status_code
    has_body = bool((resp.content or b"").strip())

    if 200 <= status <= 299:
        if not has_body:
            return Ok({})
        try:
            return Ok(resp.json())
        except ValueError:
            return Err(DecodeError(f"PayPal returned malformed JSON (HTTP {status})", resp.text, status))

    try:
        detail = resp.json() if has_body else None
    except ValueError:
        detail = None
    body = detail if detail is not None else (resp.text or "")

    name = message = debug_id = None
    details = None
    if isinstance(detail, dict):
        name = detail.get("name") or detail.get("error")
        message = detail.get("message") or detail.get("error_description")
        debug_id = detail.get("debug_id")
        details = detail.get("details")
    debug_id = debug_id or resp.headers.get("PayPal-Debug-Id")

    error_cls = UnauthorizedError if status == 401 else ApiError
    return Err(error_cls(
        message or f"PayPal API error: HTTP {status}",
        status_code=status,
        body=body,
        name=name,
        debug_id=debug_id,
        details=details,
    ))


def _to_document(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body
