"""Unit tests for request field mapping."""

from datetime import date, datetime

import pytest

from adyen_gateway.models import (
    Address,
    CreditCard,
    MissingFieldError,
    NetworkTokenCard,
    RequestValidationError,
    StoredReference,
    WalletSource,
)
from adyen_gateway.translation import fields


class TestInitRequest:
    """Tests for the common request header fields."""

    def test_merchant_account_and_reference(self):
        request = fields.init_request("TestMerchant", {"order_id": "order-1"})

        assert request == {"merchantAccount": "TestMerchant", "reference": "order-1"}

    def test_merchant_account_override(self):
        request = fields.init_request("TestMerchant", {"merchant_account": "Other"})

        assert request == {"merchantAccount": "Other"}


class TestInvoice:
    """Tests for money fields."""

    def test_amount_with_default_currency(self):
        request = {}
        fields.add_invoice(request, 1000, {}, "USD")

        assert request["amount"] == {"value": 1000, "currency": "USD"}
        assert "recurringProcessingModel" not in request

    def test_currency_override_and_recurring_model(self):
        request = {}
        fields.add_invoice(
            request, 250, {"currency": "EUR", "recurring_processing_model": "Subscription"}, "USD"
        )

        assert request["amount"] == {"value": 250, "currency": "EUR"}
        assert request["recurringProcessingModel"] == "Subscription"

    def test_modification_amount(self):
        request = {}
        fields.add_invoice_for_modification(request, 500, {"currency": "GBP"}, "USD")

        assert request == {"modificationAmount": {"value": 500, "currency": "GBP"}}

    @pytest.mark.parametrize("money", ["10.00", 10.5, None, True])
    def test_non_integer_amount_rejected(self, money):
        with pytest.raises(RequestValidationError):
            fields.add_invoice({}, money, {}, "USD")


class TestCardPayment:
    """Tests for raw card and network token payment methods."""

    def test_card_fields(self, credit_card):
        request = {}
        fields.add_payment(request, credit_card)

        assert request["paymentMethod"] == {
            "type": "scheme",
            "expiryMonth": 8,
            "expiryYear": 2030,
            "holderName": "John Smith",
            "number": "4111111111111111",
            "cvc": "737",
        }
        assert "mpiData" not in request

    def test_blank_cvc_dropped(self):
        card = CreditCard(
            number="4111111111111111", month=8, year=2030, holder_name="John", verification_value=" "
        )
        request = {}
        fields.add_payment(request, card)

        assert "cvc" not in request["paymentMethod"]

    @pytest.mark.parametrize(
        "overrides, missing",
        [
            ({"number": ""}, "number"),
            ({"month": None}, "expiryMonth"),
            ({"year": ""}, "expiryYear"),
            ({"holder_name": None}, "holderName"),
        ],
    )
    def test_missing_required_field(self, overrides, missing):
        values = {
            "number": "4111111111111111",
            "month": 8,
            "year": 2030,
            "holder_name": "John Smith",
            **overrides,
        }

        with pytest.raises(MissingFieldError) as exc_info:
            fields.add_payment({}, CreditCard(**values))

        assert exc_info.value.fields == (missing,)

    def test_network_token_mpi_data(self, network_token_card):
        request = {}
        fields.add_payment(request, network_token_card)

        assert request["mpiData"] == {
            "authenticationResponse": "Y",
            "cavv": "YwAAAAAABaYcCMX/OhNRQAAAAAA=",
            "directoryResponse": "Y",
            "eci": "07",
        }
        assert request["paymentMethod"]["holderName"] == "Not Provided"

    def test_network_token_keeps_eci_and_name(self):
        card = NetworkTokenCard(
            number="4111111111111111",
            month=8,
            year=2030,
            payment_cryptogram="cryptogram",
            source="google_pay",
            eci="05",
            holder_name="Jane Doe",
        )
        request = {}
        fields.add_payment(request, card)

        assert request["mpiData"]["eci"] == "05"
        assert request["paymentMethod"]["holderName"] == "Jane Doe"


class TestStoredReferencePayment:
    """Tests for recurring payments from a stored reference."""

    def test_recurring_reference_used(self):
        request = {}
        fields.add_payment(request, StoredReference("#store-psp-1#8315202663743702"))

        assert request == {
            "selectedRecurringDetailReference": "8315202663743702",
            "enableRecurring": True,
        }

    def test_missing_recurring_segment(self):
        with pytest.raises(MissingFieldError):
            fields.add_payment({}, StoredReference("8315202663743702"))


class TestExtraData:
    """Tests for optional shopper and routing metadata."""

    def test_only_present_options_copied(self, credit_card):
        request = {}
        fields.add_extra_data(
            request,
            credit_card,
            {
                "shopper_email": "john@example.com",
                "fraud_offset": 10,
                "delivery_date": "2030-01-01T00:00:00Z",
                "merchant_order_reference": "ORDER-1",
                "shopper_ip": None,
            },
        )

        assert request["shopperEmail"] == "john@example.com"
        assert request["fraudOffset"] == 10
        assert request["deliveryDate"] == "2030-01-01T00:00:00Z"
        assert request["merchantOrderReference"] == "ORDER-1"
        assert "shopperIP" not in request
        assert "selectedBrand" not in request
        assert request["additionalData"] == {}

    def test_zero_and_false_values(self, credit_card):
        request = {}
        fields.add_extra_data(
            request, credit_card, {"fraud_offset": 0, "custom_routing_flag": False}
        )

        assert request["fraudOffset"] == 0
        assert "customRoutingFlag" not in request["additionalData"]

    @pytest.mark.parametrize(
        "delivery_date, expected",
        [
            (date(2030, 1, 1), "2030-01-01"),
            (datetime(2030, 1, 1, 12, 30), "2030-01-01T12:30:00"),
            ("2030-01-01T00:00:00Z", "2030-01-01T00:00:00Z"),
        ],
    )
    def test_delivery_date_serialized(self, credit_card, delivery_date, expected):
        request = {}
        fields.add_extra_data(request, credit_card, {"delivery_date": delivery_date})

        assert request["deliveryDate"] == expected

    def test_network_token_brand_routing(self, network_token_card):
        request = {}
        fields.add_extra_data(request, network_token_card, {})

        assert request["selectedBrand"] == "applepay"
        assert request["additionalData"] == {"paymentdatasource.type": "applepay"}

    def test_selected_brand_option_wins(self, network_token_card):
        request = {}
        fields.add_extra_data(request, network_token_card, {"selected_brand": "maestro"})

        assert request["selectedBrand"] == "maestro"

    @pytest.mark.parametrize(
        "source, expected",
        [
            (WalletSource.APPLE_PAY, "applepay"),
            (WalletSource.ANDROID_PAY, "androidpay"),
            (WalletSource.GOOGLE_PAY, "paywithgoogle"),
        ],
    )
    def test_wallet_sources(self, source, expected):
        card = NetworkTokenCard(
            number="4111111111111111", month=8, year=2030, payment_cryptogram="c", source=source
        )

        assert fields.wallet_source(card) == expected

    def test_overwrite_brand_and_routing_flag(self, credit_card):
        request = {}
        fields.add_extra_data(
            request, credit_card, {"overwrite_brand": "true", "custom_routing_flag": "credit"}
        )

        assert request["additionalData"] == {"overwriteBrand": True, "customRoutingFlag": "credit"}

    def test_overwrite_brand_null_omitted(self, credit_card):
        request = {}
        fields.add_extra_data(request, credit_card, {"overwrite_brand": "null"})

        assert "overwriteBrand" not in request["additionalData"]


class TestShopperInteraction:
    """Tests for the Ecommerce / ContAuth classification."""

    def test_card_with_cvc_is_ecommerce(self, credit_card):
        request = {}
        fields.add_shopper_interaction(request, credit_card, {})

        assert request["shopperInteraction"] == "Ecommerce"

    def test_card_without_cvc_is_contauth(self):
        card = CreditCard(number="4111111111111111", month=8, year=2030, holder_name="John")
        request = {}
        fields.add_shopper_interaction(request, card, {})

        assert request["shopperInteraction"] == "ContAuth"

    def test_network_token_is_ecommerce(self, network_token_card):
        request = {}
        fields.add_shopper_interaction(request, network_token_card, {})

        assert request["shopperInteraction"] == "Ecommerce"

    def test_stored_reference_is_contauth(self):
        request = {}
        fields.add_shopper_interaction(request, StoredReference("#a#b"), {})

        assert request["shopperInteraction"] == "ContAuth"

    def test_option_override(self, credit_card):
        request = {}
        fields.add_shopper_interaction(request, credit_card, {"shopper_interaction": "Moto"})

        assert request["shopperInteraction"] == "Moto"


class TestAddress:
    """Tests for billing and delivery address mapping."""

    def test_full_billing_address(self, billing_address):
        request = {}
        fields.add_address(request, {"billing_address": billing_address})

        assert request["billingAddress"] == {
            "street": "456 My Street",
            "houseNumberOrName": "Apt 1",
            "postalCode": "K1C2N6",
            "city": "Ottawa",
            "stateOrProvince": "ON",
            "country": "CA",
        }

    def test_placeholders_and_omissions(self):
        request = {}
        fields.add_address(request, {"address": {"country": "US"}})

        assert request["billingAddress"] == {
            "street": "N/A",
            "houseNumberOrName": "N/A",
            "city": "N/A",
            "country": "US",
        }

    def test_no_country_no_address(self):
        request = {}
        fields.add_address(request, {"billing_address": Address(address1="1 Main St", city="Ottawa")})

        assert "billingAddress" not in request

    def test_shipping_address_mapped_to_delivery(self, billing_address):
        request = {}
        fields.add_address(request, {"shipping_address": billing_address})

        assert request["deliveryAddress"]["city"] == "Ottawa"
        assert "billingAddress" not in request


class TestReferences:
    """Tests for modification references."""

    def test_capture_reference_uses_psp_segment(self):
        request = {}
        fields.add_reference(request, "#psp123#")

        assert request["originalReference"] == "psp123"

    def test_refund_reference_uses_original_segment(self):
        request = {}
        fields.add_original_reference(request, "psp123#capture-psp-1#")

        assert request["originalReference"] == "psp123"

    def test_bare_reference(self):
        request = {}
        fields.add_original_reference(request, "8835511210681145")

        assert request["originalReference"] == "8835511210681145"

    def test_missing_reference(self):
        with pytest.raises(MissingFieldError):
            fields.add_reference({}, None)
        with pytest.raises(MissingFieldError):
            fields.add_original_reference({}, "#psp123#")


class TestMisc:
    """Tests for the remaining fragments."""

    def test_installments(self):
        request = {}
        fields.add_installments(request, {"installments": 3})

        assert request == {"installments": {"value": 3}}

    def test_zero_installments_kept(self):
        request = {}
        fields.add_installments(request, {"installments": 0})

        assert request == {"installments": {"value": 0}}

    def test_missing_installments_omitted(self):
        request = {}
        fields.add_installments(request, {"installments": None})

        assert request == {}

    def test_application_info(self):
        request = {}
        fields.add_application_info(request, "platform", "source", "1.2.3")

        assert request["applicationInfo"] == {
            "externalPlatform": {"name": "platform", "version": "1.2.3"},
            "adyenPaymentSource": {"name": "source", "version": "1.2.3"},
        }

    def test_require_options(self):
        with pytest.raises(MissingFieldError, match="order_id"):
            fields.require_options({"order_id": " "}, "order_id")

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("false", False), ("", None), ("null", None), ("visa", "visa")],
    )
    def test_normalize(self, value, expected):
        assert fields.normalize(value) == expected
