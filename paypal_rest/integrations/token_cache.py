import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests
import structlog

from paypal_rest.core.errors import AuthError, DecodeError, TransportError
from paypal_rest.core.result import ApiResult, Err, Ok
from paypal_rest.models.schemas import Credentials

log = structlog.get_logger(__name__)

TOKEN_PATH = "/v1/oauth2/token"
DEFAULT_EXPIRES_IN = 32400  # PayPal's usual lifetime (9h) when the response omits it


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at: float
    token_type: str = "Bearer"
    scope: Optional[str] = None
    app_id: Optional[str] = None

    def is_expired(self, now: float, leeway: float = 0) -> bool:
        return now >= self.expires_at - leeway


class TokenCache:
    """Holds the current OAuth2 access token for one set of credentials.

    The token is replaced wholesale on refresh, so concurrent readers see
    either the old or the new token. Overlapping refreshes are allowed;
    the last one to finish wins.
    """

    def __init__(self,
                 credentials: Credentials,
                 session: requests.Session,
                 base_url: Optional[str] = None,
                 timeout: float = 30.0,
                 leeway: float = 0,
                 clock: Callable[[], float] = time.time):
        self.credentials = credentials
        self.session = session
        self.base_url = (base_url or credentials.base_url).rstrip("/")
        self.timeout = timeout
        self.leeway = leeway
        self._clock = clock
        self._token = None  # type: Optional[AccessToken]

    @property
    def token(self) -> Optional[AccessToken]:
        return self._token

    def invalidate(self) -> None:
        self._token = None

    def get_token(self, force_refresh: bool = False) -> ApiResult[str]:
        token = self._token
        if not force_refresh and token is not None and not token.is_expired(self._clock(), self.leeway):
            return Ok(token.value)
        return self.refresh()

    def refresh(self) -> ApiResult[str]:
        token_url = f"{self.base_url}{TOKEN_PATH}"
        auth = (self.credentials.client_id, self.credentials.client_secret.get_secret_value())
        data = {"grant_type": "client_credentials"}
        try:
            resp = self.session.post(token_url, data=data, auth=auth,
                                     headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("paypal.token.failed", reason="transport", error=repr(e))
            return Err(TransportError(f"PayPal token request failed: {e}", original=e))

        body_text = resp.text or ""
        try:
            payload = resp.json() if (resp.content or b"").strip() else {}
        except ValueError:
            payload = None

        if not 200 <= resp.status_code < 300:
            detail = payload if payload is not None else body_text
            log.warning("paypal.token.failed", reason="status", status=resp.status_code)
            return Err(AuthError(f"PayPal token request failed: {resp.status_code} {detail}",
                                 status_code=resp.status_code, body=detail))
        if payload is None:
            return Err(DecodeError("PayPal token response is not valid JSON", body_text, resp.status_code))
        if not isinstance(payload, dict) or not payload.get("access_token"):
            return Err(AuthError("PayPal token response has no access_token",
                                 status_code=resp.status_code, body=payload))

        raw_expires_in = payload.get("expires_in")
        if raw_expires_in is None:
            expires_in = DEFAULT_EXPIRES_IN
        else:
            try:
                expires_in = int(float(raw_expires_in))
            except (TypeError, ValueError, OverflowError):
                log.warning("paypal.token.failed", reason="expires_in", status=resp.status_code)
                return Err(AuthError(f"PayPal token response has an invalid expires_in: {raw_expires_in!r}",
                                     status_code=resp.status_code, body=payload))
        token = AccessToken(
            value=payload["access_token"],
            expires_at=self._clock() + expires_in,
            token_type=payload.get("token_type", "Bearer"),
            scope=payload.get("scope"),
            app_id=payload.get("app_id"),
        )
        self._token = token
        log.info("paypal.token.refreshed", expires_in=expires_in, scope=token.scope)
        return Ok(token.value)
