"""Configuration management for the Adyen gateway adapter."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdyenSettings(BaseSettings):
    """Adyen account and endpoint settings."""

    api_key: str = Field(default="", description="Adyen API key (x-api-key header)")
    merchant_account: str = Field(default="", description="Adyen merchant account code")
    test_mode: bool = Field(default=True, description="Use Adyen test endpoints")
    live_endpoint_url_prefix: str = Field(
        default="",
        description="Merchant-specific live endpoint prefix (e.g. '1797a841fbb37ca7-AdyenDemo')"
    )
    default_currency: str = Field(default="USD", description="Currency used when none is supplied")
    timeout_seconds: float = Field(default=10.0, description="Request timeout")
    log_transcripts: bool = Field(
        default=False,
        description="Log scrubbed request/response transcripts at debug level"
    )
    external_platform_name: str = Field(
        default="adyen-gateway",
        description="Reported as applicationInfo.externalPlatform.name"
    )
    payment_source_name: str = Field(
        default="adyen-gateway",
        description="Reported as applicationInfo.adyenPaymentSource.name"
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    # Adyen
    adyen: AdyenSettings = Field(default_factory=AdyenSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


# Global settings instance
settings = Settings()
