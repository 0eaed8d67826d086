"""
Gateway factory.

Builds an AdyenGateway from the global settings, or from an explicit
configuration dict.
"""

from typing import Any

import structlog

from adyen_gateway.config import settings
from adyen_gateway.processors.adyen_processor import AdyenGateway

logger = structlog.get_logger(__name__)


def _get_default_config() -> dict[str, Any]:
    """
    Get gateway configuration from settings.

    Returns:
        Configuration dictionary with AdyenGateway keyword arguments
    """
    adyen = settings.adyen
    return {
        "api_key": adyen.api_key,
        "merchant_account": adyen.merchant_account,
        "test": adyen.test_mode,
        "live_endpoint_url_prefix": adyen.live_endpoint_url_prefix or None,
        "default_currency": adyen.default_currency,
        "timeout_seconds": adyen.timeout_seconds,
        "log_transcripts": adyen.log_transcripts,
        "external_platform_name": adyen.external_platform_name,
        "payment_source_name": adyen.payment_source_name,
    }


def get_gateway(gateway_config: dict[str, Any] | None = None) -> AdyenGateway:
    """
    Create an Adyen gateway.

    Args:
        gateway_config: Optional AdyenGateway keyword arguments. Keys not
            given fall back to settings.

    Returns:
        AdyenGateway ready to process transactions

    Raises:
        GatewayConfigurationError: If the API key or merchant account is blank

    Examples:
        # Using global config
        gateway = get_gateway()

        # Using custom config
        gateway = get_gateway({"api_key": "AQE...", "merchant_account": "ShopCOM"})
    """
    config = {**_get_default_config(), **(gateway_config or {})}
    gateway = AdyenGateway(**config)

    logger.info(
        "gateway_created",
        gateway=gateway.display_name,
        merchant_account=gateway.merchant_account,
        test=gateway.test,
    )
    return gateway
