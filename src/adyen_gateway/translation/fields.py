"""
Request field mapping.

Each ``add_*`` function writes one fragment of an Adyen request into the
request dict being assembled. None of them touch the network or any state
outside the request.
"""

from datetime import date
from typing import Any, Mapping

from adyen_gateway.models import (
    Address,
    MissingFieldError,
    NetworkTokenCard,
    PaymentSource,
    PaymentSourceKind,
    RequestValidationError,
)
from adyen_gateway.translation import authorization

PLACEHOLDER = "N/A"
NETWORK_TOKEN_HOLDER_NAME = "Not Provided"
DEFAULT_ECI = "07"

NETWORK_TOKENIZATION_CARD_SOURCE = {
    "apple_pay": "applepay",
    "android_pay": "androidpay",
    "google_pay": "paywithgoogle",
}

REQUIRED_CARD_FIELDS = ("type", "expiryMonth", "expiryYear", "holderName", "number")

# option key -> request key, copied only when present
EXTRA_DATA_FIELDS = {
    "shopper_email": "shopperEmail",
    "shopper_ip": "shopperIP",
    "shopper_reference": "shopperReference",
    "fraud_offset": "fraudOffset",
    "selected_brand": "selectedBrand",
    "delivery_date": "deliveryDate",
    "merchant_order_reference": "merchantOrderReference",
}


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_present(options: Mapping[str, Any], key: str) -> bool:
    """An option is present unless it is missing, None or False."""
    value = options.get(key)
    return value is not None and value is not False


def normalize(value: Any) -> Any:
    """Turn textual booleans into booleans; blank or 'null' into None."""
    if value == "true":
        return True
    if value == "false":
        return False
    if value in ("", "null"):
        return None
    return value


def amount_value(money: Any) -> int:
    """Validate a minor-unit amount."""
    if isinstance(money, bool) or not isinstance(money, int):
        raise RequestValidationError(
            f"Amount must be an integer number of minor units, got {money!r}"
        )
    return money


def wallet_source(payment: NetworkTokenCard) -> str | None:
    source = getattr(payment.source, "value", payment.source)
    return NETWORK_TOKENIZATION_CARD_SOURCE.get(source)


def init_request(merchant_account: str, options: Mapping[str, Any]) -> dict[str, Any]:
    request: dict[str, Any] = {
        "merchantAccount": options.get("merchant_account") or merchant_account,
    }
    if options.get("order_id"):
        request["reference"] = options["order_id"]
    return request


def add_invoice(
    request: dict[str, Any],
    money: int,
    options: Mapping[str, Any],
    default_currency: str,
) -> None:
    request["amount"] = {
        "value": amount_value(money),
        "currency": options.get("currency") or default_currency,
    }
    if is_present(options, "recurring_processing_model"):
        request["recurringProcessingModel"] = options["recurring_processing_model"]


def add_invoice_for_modification(
    request: dict[str, Any],
    money: int,
    options: Mapping[str, Any],
    default_currency: str,
) -> None:
    request["modificationAmount"] = {
        "value": amount_value(money),
        "currency": options.get("currency") or default_currency,
    }


def add_payment(request: dict[str, Any], payment: PaymentSource) -> None:
    """Embed the payment source, dispatching on its variant."""
    if payment.kind is PaymentSourceKind.STORED_REFERENCE:
        recurring_reference = authorization.decode(payment.token).recurring_reference
        if is_blank(recurring_reference):
            raise MissingFieldError("selectedRecurringDetailReference")
        request["selectedRecurringDetailReference"] = recurring_reference
        add_recurring_contract(request)
        return

    if payment.kind is PaymentSourceKind.NETWORK_TOKEN:
        add_mpi_data(request, payment)
    add_card(request, payment)


def add_card(request: dict[str, Any], card: PaymentSource) -> None:
    fields = {
        "type": "scheme",
        "expiryMonth": card.month,
        "expiryYear": card.year,
        "holderName": card.holder_name,
        "number": card.number,
        "cvc": card.verification_value,
    }
    payment_method = {key: value for key, value in fields.items() if not is_blank(value)}

    if card.kind is PaymentSourceKind.NETWORK_TOKEN:
        payment_method.setdefault("holderName", NETWORK_TOKEN_HOLDER_NAME)

    missing = [key for key in REQUIRED_CARD_FIELDS if key not in payment_method]
    if missing:
        raise MissingFieldError(*missing)

    request["paymentMethod"] = payment_method


def add_mpi_data(request: dict[str, Any], payment: NetworkTokenCard) -> None:
    request["mpiData"] = {
        "authenticationResponse": "Y",
        "cavv": payment.payment_cryptogram,
        "directoryResponse": "Y",
        "eci": payment.eci or DEFAULT_ECI,
    }


def add_extra_data(
    request: dict[str, Any],
    payment: PaymentSource,
    options: Mapping[str, Any],
) -> None:
    for option_key, request_key in EXTRA_DATA_FIELDS.items():
        if is_present(options, option_key):
            request[request_key] = options[option_key]
    if isinstance(request.get("deliveryDate"), date):
        request["deliveryDate"] = request["deliveryDate"].isoformat()

    is_network_token = payment.kind is PaymentSourceKind.NETWORK_TOKEN
    if is_network_token and "selectedBrand" not in request:
        brand = wallet_source(payment)
        if brand:
            request["selectedBrand"] = brand

    additional_data = request.setdefault("additionalData", {})
    if is_present(options, "overwrite_brand"):
        overwrite_brand = normalize(options["overwrite_brand"])
        if overwrite_brand is not None:
            additional_data["overwriteBrand"] = overwrite_brand
    if is_present(options, "custom_routing_flag"):
        additional_data["customRoutingFlag"] = options["custom_routing_flag"]
    if is_network_token:
        data_source = wallet_source(payment)
        if data_source:
            additional_data["paymentdatasource.type"] = data_source


def add_shopper_interaction(
    request: dict[str, Any],
    payment: PaymentSource,
    options: Mapping[str, Any],
) -> None:
    if payment.kind is PaymentSourceKind.NETWORK_TOKEN:
        shopper_interaction = "Ecommerce"
    elif payment.kind is PaymentSourceKind.CREDIT_CARD and not is_blank(
        payment.verification_value
    ):
        shopper_interaction = "Ecommerce"
    else:
        shopper_interaction = "ContAuth"

    request["shopperInteraction"] = options.get("shopper_interaction") or shopper_interaction


def _address_field(address: Address | Mapping[str, Any], name: str) -> Any:
    if isinstance(address, Mapping):
        return address.get(name)
    return getattr(address, name, None)


def address_fragment(address: Address | Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Map an address; None when there is no address or it has no country."""
    if not address or is_blank(_address_field(address, "country")):
        return None

    fragment = {
        "street": _address_field(address, "address1") or PLACEHOLDER,
        "houseNumberOrName": _address_field(address, "address2") or PLACEHOLDER,
    }
    if _address_field(address, "zip"):
        fragment["postalCode"] = _address_field(address, "zip")
    fragment["city"] = _address_field(address, "city") or PLACEHOLDER
    if _address_field(address, "state"):
        fragment["stateOrProvince"] = _address_field(address, "state")
    fragment["country"] = _address_field(address, "country")
    return fragment


def add_address(request: dict[str, Any], options: Mapping[str, Any]) -> None:
    billing_address = address_fragment(
        options.get("billing_address") or options.get("address")
    )
    if billing_address:
        request["billingAddress"] = billing_address

    delivery_address = address_fragment(options.get("shipping_address"))
    if delivery_address:
        request["deliveryAddress"] = delivery_address


def add_installments(request: dict[str, Any], options: Mapping[str, Any]) -> None:
    if is_present(options, "installments"):
        request["installments"] = {"value": options["installments"]}


def add_recurring_contract(request: dict[str, Any]) -> None:
    request["enableRecurring"] = True


def add_reference(request: dict[str, Any], token: str | None) -> None:
    """Reference the authorization a capture or void modifies."""
    reference = authorization.modification_reference(token) if token else None
    if is_blank(reference):
        raise MissingFieldError("originalReference")
    request["originalReference"] = reference


def add_original_reference(request: dict[str, Any], token: str | None) -> None:
    """Reference the original payment a refund returns funds from."""
    reference = authorization.refund_reference(token) if token else None
    if is_blank(reference):
        raise MissingFieldError("originalReference")
    request["originalReference"] = reference


def add_application_info(
    request: dict[str, Any],
    platform_name: str,
    payment_source_name: str,
    version: str,
) -> None:
    request["applicationInfo"] = {
        "externalPlatform": {"name": platform_name, "version": version},
        "adyenPaymentSource": {"name": payment_source_name, "version": version},
    }


def require_options(options: Mapping[str, Any], *keys: str) -> None:
    missing = [key for key in keys if is_blank(options.get(key))]
    if missing:
        raise MissingFieldError(*missing)
