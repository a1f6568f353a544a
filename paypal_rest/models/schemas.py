from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from paypal_rest.core.config import Settings
from paypal_rest.core.errors import ConfigError

# Generic structured document passed straight through to the wire
JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]
JSONDocument = Dict[str, JSONValue]

BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: SecretStr
    environment: Literal["sandbox", "live"] = "sandbox"

    @field_validator("client_id")
    @classmethod
    def _client_id_present(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("client_id must not be empty")
        return value.strip()

    @field_validator("client_secret")
    @classmethod
    def _client_secret_present(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("client_secret must not be empty")
        return value

    @property
    def base_url(self) -> str:
        return BASE_URLS[self.environment]

    @classmethod
    def build(cls,
              client_id: Optional[str],
              client_secret: Optional[str],
              environment: Optional[str] = None) -> "Credentials":
        """Validate raw values, reporting any problem as ``ConfigError``."""
        if not client_id or not client_secret:
            raise ConfigError("PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET must be set")
        try:
            return cls(client_id=client_id, client_secret=client_secret,
                       environment=(environment or "sandbox").strip().lower())
        except ValueError as e:
            raise ConfigError(f"Invalid PayPal credentials: {e}") from e

    @classmethod
    def from_settings(cls, config: Settings) -> "Credentials":
        return cls.build(config.paypal_client_id, config.paypal_client_secret, config.paypal_environment)


class WebhookTransmission(BaseModel):
    """Transmission headers PayPal attaches to every webhook delivery."""

    auth_algo: str
    cert_url: str
    transmission_id: str
    transmission_sig: str
    transmission_time: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, Any]) -> "WebhookTransmission":
        lowered = {str(k).lower(): v for k, v in headers.items()}
        return cls(
            auth_algo=lowered.get("paypal-auth-algo"),
            cert_url=lowered.get("paypal-cert-url"),
            transmission_id=lowered.get("paypal-transmission-id"),
            transmission_sig=lowered.get("paypal-transmission-sig"),
            transmission_time=lowered.get("paypal-transmission-time"),
        )


class WebhookAck(BaseModel):
    status: str = "ok"
    event_id: Optional[str] = None
    event_type: Optional[str] = None
    verification_status: str = Field(default="SUCCESS")
