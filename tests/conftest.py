"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Gateway instances in test and live mode
- Sample payment sources and addresses
- Helpers that build mocked httpx responses
"""

import json
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from adyen_gateway.models import (
    Address,
    CreditCard,
    NetworkTokenCard,
    WalletSource,
)
from adyen_gateway.processors.adyen_processor import AdyenGateway


@pytest.fixture
def gateway() -> AdyenGateway:
    """Create a test-mode Adyen gateway."""
    return AdyenGateway(api_key="test-api-key", merchant_account="TestMerchant")


@pytest.fixture
def live_gateway() -> AdyenGateway:
    """Create a live-mode Adyen gateway with a merchant endpoint prefix."""
    return AdyenGateway(
        api_key="live-api-key",
        merchant_account="LiveMerchant",
        test=False,
        live_endpoint_url_prefix="1797a841fbb37ca7-AdyenDemo",
    )


@pytest.fixture
def credit_card() -> CreditCard:
    """Standard test card with a verification code."""
    return CreditCard(
        number="4111111111111111",
        month=8,
        year=2030,
        holder_name="John Smith",
        verification_value="737",
    )


@pytest.fixture
def network_token_card() -> NetworkTokenCard:
    """Apple Pay network token without holder name or ECI."""
    return NetworkTokenCard(
        number="4111111111111111",
        month=8,
        year=2030,
        payment_cryptogram="YwAAAAAABaYcCMX/OhNRQAAAAAA=",
        source=WalletSource.APPLE_PAY,
    )


@pytest.fixture
def billing_address() -> Address:
    """Complete billing address."""
    return Address(
        address1="456 My Street",
        address2="Apt 1",
        city="Ottawa",
        state="ON",
        zip="K1C2N6",
        country="CA",
    )


@pytest.fixture
def options(billing_address: Address) -> dict[str, Any]:
    """Options for an authorization."""
    return {
        "order_id": "order-345123",
        "billing_address": billing_address,
        "shopper_email": "john.smith@test.com",
        "shopper_ip": "77.110.174.153",
        "shopper_reference": "John Smith",
    }


def make_response(status_code: int = 200, body: dict[str, Any] | str | None = None) -> MagicMock:
    """Build a mocked httpx.Response."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    if isinstance(body, dict):
        response.text = json.dumps(body)
    else:
        response.text = body or ""
    return response


AUTHORISED_RESPONSE = {
    "additionalData": {
        "cvcResult": "1 Matches",
        "avsResult": "4 AVS not supported for this card type",
        "refusalReasonRaw": "AUTHORISED",
    },
    "pspReference": "psp123",
    "resultCode": "Authorised",
}

REFUSED_RESPONSE = {
    "additionalData": {
        "refusalReasonRaw": "CVC Declined",
    },
    "pspReference": "psp-refused-1",
    "refusalReason": "CVC Declined",
    "resultCode": "Refused",
}

CAPTURE_RESPONSE = {"pspReference": "capture-psp-1", "response": "[capture-received]"}
REFUND_RESPONSE = {"pspReference": "refund-psp-1", "response": "[refund-received]"}
CANCEL_RESPONSE = {"pspReference": "cancel-psp-1", "response": "[cancel-received]"}

STORE_RESPONSE = {
    "additionalData": {
        "recurring.recurringDetailReference": "8315202663743702",
        "recurring.shopperReference": "John Smith",
    },
    "pspReference": "store-psp-1",
    "resultCode": "Authorised",
}

INVALID_CARD_RESPONSE = {
    "status": 422,
    "errorCode": "101",
    "message": "Invalid card number",
    "errorType": "validation",
}
