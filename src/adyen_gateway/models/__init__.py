"""Domain models for the Adyen gateway adapter."""

from adyen_gateway.models.exceptions import (
    GatewayConfigurationError,
    GatewayError,
    MissingFieldError,
    RequestValidationError,
    TransportError,
)
from adyen_gateway.models.payment_source import (
    Address,
    CreditCard,
    NetworkTokenCard,
    PaymentSource,
    PaymentSourceKind,
    StoredReference,
    WalletSource,
    as_payment_source,
)
from adyen_gateway.models.result import NormalizedResult, StandardErrorCode
from adyen_gateway.models.verification import AVSResult, CVVResult

__all__ = [
    "AVSResult",
    "Address",
    "CVVResult",
    "CreditCard",
    "GatewayConfigurationError",
    "GatewayError",
    "MissingFieldError",
    "NetworkTokenCard",
    "NormalizedResult",
    "PaymentSource",
    "PaymentSourceKind",
    "RequestValidationError",
    "StandardErrorCode",
    "StoredReference",
    "TransportError",
    "WalletSource",
    "as_payment_source",
]
