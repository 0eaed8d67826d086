"""Base interface for payment gateways."""

from abc import ABC, abstractmethod
from typing import Any

from adyen_gateway.models import NormalizedResult, PaymentSource


class PaymentGateway(ABC):
    """
    Abstract base class for card payment gateways.

    Every operation returns a NormalizedResult. Processor declines and
    processor-reported errors are failed results, not exceptions; only
    construction errors (RequestValidationError) are raised, and they are
    raised before any request is sent.
    """

    @abstractmethod
    def authorize(
        self,
        money: int,
        payment: PaymentSource | str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        """
        Place a hold of ``money`` minor units on the payment source.

        Raises:
            RequestValidationError: Missing order_id or incomplete card data.
        """

    @abstractmethod
    def capture(
        self,
        money: int,
        authorization: str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        """Capture funds held by a prior authorization."""

    @abstractmethod
    def refund(
        self,
        money: int,
        authorization: str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        """Return captured funds to the shopper."""

    @abstractmethod
    def void(self, authorization: str, options: dict[str, Any]) -> NormalizedResult:
        """Release a prior authorization."""

    @abstractmethod
    def store(self, payment: PaymentSource | str, options: dict[str, Any]) -> NormalizedResult:
        """Store a card for recurring use; the authorization carries its reference."""

    @abstractmethod
    def purchase(
        self,
        money: int,
        payment: PaymentSource | str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        """Authorize and immediately capture."""

    @abstractmethod
    def verify(self, payment: PaymentSource | str, options: dict[str, Any]) -> NormalizedResult:
        """Check a card with a zero-amount authorization that is then voided."""
