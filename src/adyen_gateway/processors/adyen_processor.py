"""
Adyen payment gateway.

Authorizations go through Adyen's Checkout API; capture, refund, cancel and
store go through the classic Payment API. Each primitive operation is one
request/response round trip; purchase and verify are composed from
primitives by the step runner.

Reference:
- https://docs.adyen.com/api-explorer/Checkout/32/post/payments
- https://docs.adyen.com/development-resources/live-endpoints
"""

from typing import Any

import structlog

from adyen_gateway import __version__
from adyen_gateway.clients.adyen_client import AdyenClient
from adyen_gateway.models import (
    GatewayConfigurationError,
    NormalizedResult,
    PaymentSource,
    TransportError,
    as_payment_source,
)
from adyen_gateway.processors.base import PaymentGateway
from adyen_gateway.translation import fields, responses
from adyen_gateway.translation.scrubbing import scrub
from adyen_gateway.translation.sequencing import (
    ContinuationPolicy,
    OperationStep,
    run_steps,
)

logger = structlog.get_logger(__name__)

TEST_CHECKOUT_URL = "https://checkout-test.adyen.com/checkout/v32"
LIVE_CHECKOUT_URL = "https://{prefix}-checkout-live.adyenpayments.com/checkout/v32"
TEST_PAL_URL = "https://pal-test.adyen.com/pal/servlet/Payment"
LIVE_PAL_URL = "https://{prefix}-pal-live.adyenpayments.com/pal/servlet/Payment"

CHECKOUT_ACTIONS = frozenset({"payments"})


class AdyenGateway(PaymentGateway):
    """
    Adyen implementation of the PaymentGateway contract.

    Configuration is fixed at construction; operations keep no state
    between calls.
    """

    display_name = "Adyen"
    homepage_url = "https://www.adyen.com/"
    money_format = "cents"
    supports_scrubbing = True
    supported_countries = (
        "AT", "AU", "BE", "BG", "BR", "CH", "CY", "CZ", "DE", "DK", "EE", "ES",
        "FI", "FR", "GB", "GI", "GR", "HK", "HU", "IE", "IS", "IT", "LI", "LT",
        "LU", "LV", "MC", "MT", "MX", "NL", "NO", "PL", "PT", "RO", "SE", "SG",
        "SK", "SI", "US",
    )
    supported_card_types = (
        "visa", "master", "american_express", "diners_club", "jcb", "dankort",
        "maestro", "discover",
    )

    def __init__(
        self,
        api_key: str,
        merchant_account: str,
        test: bool = True,
        live_endpoint_url_prefix: str | None = None,
        default_currency: str = "USD",
        timeout_seconds: float = 10.0,
        log_transcripts: bool = False,
        external_platform_name: str = "adyen-gateway",
        payment_source_name: str = "adyen-gateway",
        client: AdyenClient | None = None,
    ) -> None:
        """
        Initialize the Adyen gateway.

        Args:
            api_key: Adyen API key
            merchant_account: Merchant account code used unless overridden per call
            test: Use the test environment
            live_endpoint_url_prefix: Merchant-specific prefix for live endpoints
            default_currency: Currency used when options carry none
            timeout_seconds: Request timeout in seconds
            log_transcripts: Log scrubbed request/response transcripts
            external_platform_name: applicationInfo.externalPlatform.name
            payment_source_name: applicationInfo.adyenPaymentSource.name
            client: Optional transport; one is created when omitted

        Raises:
            GatewayConfigurationError: Blank API key or merchant account
        """
        missing = [
            name
            for name, value in (("api_key", api_key), ("merchant_account", merchant_account))
            if fields.is_blank(value)
        ]
        if missing:
            raise GatewayConfigurationError(f"Missing required parameter: {', '.join(missing)}")

        self.api_key = api_key
        self.merchant_account = merchant_account
        self.test = test
        self.live_endpoint_url_prefix = live_endpoint_url_prefix
        self.default_currency = default_currency
        self.external_platform_name = external_platform_name
        self.payment_source_name = payment_source_name
        self.client = client or AdyenClient(
            timeout_seconds=timeout_seconds,
            log_transcripts=log_transcripts,
        )

    # Composite operations

    def purchase(
        self,
        money: int,
        payment: PaymentSource | str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        return run_steps(
            "purchase",
            [
                OperationStep("authorize", lambda _: self.authorize(money, payment, options)),
                OperationStep(
                    "capture",
                    lambda previous: self.capture(money, previous.authorization, options),
                ),
            ],
        )

    def verify(self, payment: PaymentSource | str, options: dict[str, Any]) -> NormalizedResult:
        return run_steps(
            "verify",
            [
                OperationStep("authorize", lambda _: self.authorize(0, payment, options)),
                OperationStep(
                    "void",
                    lambda previous: self.void(previous.authorization, options),
                    ContinuationPolicy.USE_FIRST_RESPONSE,
                ),
            ],
        )

    # Primitive operations

    def authorize(
        self,
        money: int,
        payment: PaymentSource | str,
        options: dict[str, Any],
    ) -> NormalizedResult:
        fields.require_options(options, "order_id")
        payment = as_payment_source(payment)

        request = fields.init_request(self.merchant_account, options)
        fields.add_invoice(request, money, options, self.default_currency)
        fields.add_payment(request, payment)
        fields.add_extra_data(request, payment, options)
        fields.add_shopper_interaction(request, payment, options)
        fields.add_address(request, options)
        fields.add_installments(request, options)
        self._add_application_info(request)
        return self._commit(
            "payments", request, options, card_last_four=getattr(payment, "last_four", None)
        )

    def capture(self, money: int, authorization: str, options: dict[str, Any]) -> NormalizedResult:
        request = fields.init_request(self.merchant_account, options)
        fields.add_invoice_for_modification(request, money, options, self.default_currency)
        fields.add_reference(request, authorization)
        self._add_application_info(request)
        return self._commit("capture", request, options)

    def refund(self, money: int, authorization: str, options: dict[str, Any]) -> NormalizedResult:
        request = fields.init_request(self.merchant_account, options)
        fields.add_invoice_for_modification(request, money, options, self.default_currency)
        fields.add_original_reference(request, authorization)
        self._add_application_info(request)
        return self._commit("refund", request, options)

    def void(self, authorization: str, options: dict[str, Any]) -> NormalizedResult:
        request = fields.init_request(self.merchant_account, options)
        fields.add_reference(request, authorization)
        self._add_application_info(request)
        return self._commit("cancel", request, options)

    def store(self, payment: PaymentSource | str, options: dict[str, Any]) -> NormalizedResult:
        fields.require_options(options, "order_id")
        payment = as_payment_source(payment)

        request = fields.init_request(self.merchant_account, options)
        fields.add_invoice(request, 0, options, self.default_currency)
        fields.add_payment(request, payment)
        fields.add_extra_data(request, payment, options)
        fields.add_recurring_contract(request)
        fields.add_address(request, options)
        self._add_application_info(request)
        return self._commit(
            "authorise", request, options, card_last_four=getattr(payment, "last_four", None)
        )

    def scrub(self, transcript: str) -> str:
        return scrub(transcript)

    # Transport

    def url(self, action: str, options: dict[str, Any] | None = None) -> str:
        """
        Endpoint for an action.

        Raises:
            GatewayConfigurationError: Live mode without an endpoint prefix
        """
        checkout = action in CHECKOUT_ACTIONS
        if self.test:
            base_url = TEST_CHECKOUT_URL if checkout else TEST_PAL_URL
            return f"{base_url}/{action}"

        prefix = (options or {}).get("live_endpoint_url_prefix") or self.live_endpoint_url_prefix
        if fields.is_blank(prefix):
            raise GatewayConfigurationError(
                "live_endpoint_url_prefix is required for live transactions"
            )
        base_url = LIVE_CHECKOUT_URL if checkout else LIVE_PAL_URL
        return f"{base_url.format(prefix=prefix)}/{action}"

    def request_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
        }

    def _add_application_info(self, request: dict[str, Any]) -> None:
        fields.add_application_info(
            request,
            self.external_platform_name,
            self.payment_source_name,
            __version__,
        )

    def _commit(
        self,
        action: str,
        request: dict[str, Any],
        options: dict[str, Any],
        card_last_four: str | None = None,
    ) -> NormalizedResult:
        url = self.url(action, options)
        log = logger.bind(action=action, order_id=options.get("order_id"))
        if card_last_four:
            log = log.bind(card_last_four=card_last_four)

        try:
            raw_body = self.client.post(url, request, self.request_headers())
        except TransportError as e:
            if not e.body or not e.body.strip():
                log.warning("adyen_transport_failure", error=str(e), status_code=e.status_code)
                return NormalizedResult(success=False, message=str(e), test=self.test)
            log.info("adyen_error_body_recovered", status_code=e.status_code)
            raw_body = e.body

        result = responses.interpret(action, request, responses.parse(raw_body), test=self.test)
        log.info(
            "adyen_response_interpreted",
            success=result.success,
            result_code=result.raw.get("resultCode"),
            error_code=result.error_code.value if result.error_code else None,
            psp_reference=result.raw.get("pspReference"),
        )
        return result
