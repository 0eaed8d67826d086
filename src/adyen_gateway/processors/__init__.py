"""
Payment gateway integrations.

- base.PaymentGateway: Abstract interface every gateway implements
- adyen_processor.AdyenGateway: Adyen integration
- factory.get_gateway: Settings-based gateway construction
"""

from adyen_gateway.processors.adyen_processor import AdyenGateway
from adyen_gateway.processors.base import PaymentGateway
from adyen_gateway.processors.factory import get_gateway

__all__ = [
    "AdyenGateway",
    "PaymentGateway",
    "get_gateway",
]
