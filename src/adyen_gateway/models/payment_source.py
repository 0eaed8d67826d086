"""
Payment source variants accepted by the gateway.

A payment source is one of three tagged variants:

- CreditCard: raw card fields
- NetworkTokenCard: a wallet/network token with its cryptogram
- StoredReference: an authorization token returned by a previous store call,
  whose third segment is the recurring detail reference

The request mapper dispatches on ``kind`` instead of probing attributes.
"""

from dataclasses import dataclass, field
from enum import Enum


class PaymentSourceKind(str, Enum):
    """Tag identifying a payment source variant."""

    CREDIT_CARD = "credit_card"
    NETWORK_TOKEN = "network_token"
    STORED_REFERENCE = "stored_reference"


class WalletSource(str, Enum):
    """Wallet that produced a network token."""

    APPLE_PAY = "apple_pay"
    ANDROID_PAY = "android_pay"
    GOOGLE_PAY = "google_pay"


@dataclass(frozen=True)
class Address:
    """Billing or delivery address supplied by the caller."""

    country: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


@dataclass(frozen=True)
class CreditCard:
    """Plain card details."""

    number: str | None
    month: int | str | None
    year: int | str | None
    holder_name: str | None = None
    verification_value: str | None = None
    kind: PaymentSourceKind = field(default=PaymentSourceKind.CREDIT_CARD, init=False)

    @property
    def last_four(self) -> str:
        return (self.number or "")[-4:]


@dataclass(frozen=True)
class NetworkTokenCard:
    """
    Network-tokenized card (Apple Pay, Google Pay, Android Pay).

    Attributes:
        number: Device/network token PAN
        month: Token expiry month
        year: Token expiry year
        payment_cryptogram: Authentication cryptogram (sent as mpiData.cavv)
        source: Wallet that issued the token
        eci: Electronic commerce indicator; '07' is sent when absent
        holder_name: Optional; a placeholder is sent when blank
        verification_value: Optional card verification code
    """

    number: str | None
    month: int | str | None
    year: int | str | None
    payment_cryptogram: str | None
    source: WalletSource | str
    eci: str | None = None
    holder_name: str | None = None
    verification_value: str | None = None
    kind: PaymentSourceKind = field(default=PaymentSourceKind.NETWORK_TOKEN, init=False)

    @property
    def last_four(self) -> str:
        return (self.number or "")[-4:]


@dataclass(frozen=True)
class StoredReference:
    """Authorization token of a stored card, used for recurring charges."""

    token: str
    kind: PaymentSourceKind = field(default=PaymentSourceKind.STORED_REFERENCE, init=False)


PaymentSource = CreditCard | NetworkTokenCard | StoredReference


def as_payment_source(payment: PaymentSource | str) -> PaymentSource:
    """Wrap a bare token string as a StoredReference; pass variants through."""
    if isinstance(payment, str):
        return StoredReference(token=payment)
    return payment
