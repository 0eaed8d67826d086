"""HTTP clients for external services."""

from adyen_gateway.clients.adyen_client import AdyenClient

__all__ = ["AdyenClient"]
