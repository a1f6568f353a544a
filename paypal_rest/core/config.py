from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "paypal-rest"
    environment: str = Field(default="dev", validation_alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # API (webhook listener)
    api_prefix: str = Field(default="/v1", validation_alias="API_PREFIX")

    # PayPal
    paypal_client_id: Optional[str] = Field(default=None, validation_alias="PAYPAL_CLIENT_ID")
    paypal_client_secret: Optional[str] = Field(default=None, validation_alias="PAYPAL_CLIENT_SECRET")
    # "sandbox" or "live"; checked by Credentials.build
    paypal_environment: str = Field(default="sandbox", validation_alias="PAYPAL_ENVIRONMENT")
    # Overrides the environment's base URL (e.g. a local mock server)
    paypal_base_url: Optional[str] = Field(default=None, validation_alias="PAYPAL_BASE_URL")
    paypal_timeout_seconds: float = Field(default=30.0, validation_alias="PAYPAL_TIMEOUT_SECONDS")
    paypal_token_leeway_seconds: int = Field(default=0, validation_alias="PAYPAL_TOKEN_LEEWAY_SECONDS")
    paypal_refresh_on_unauthorized: bool = Field(default=False, validation_alias="PAYPAL_REFRESH_ON_UNAUTHORIZED")
    paypal_webhook_id: Optional[str] = Field(default=None, validation_alias="PAYPAL_WEBHOOK_ID")
    paypal_debug: bool = Field(default=False, validation_alias="PAYPAL_DEBUG")


settings = Settings()  # type: ignore
