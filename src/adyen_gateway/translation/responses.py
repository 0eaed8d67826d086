"""
Response interpretation.

Turns a parsed Adyen response into a NormalizedResult. Everything here is a
pure function of the action, the outbound request and the response body,
plus the fixed lookup tables below.
"""

import json
from types import MappingProxyType
from typing import Any, Mapping

from adyen_gateway.models import (
    AVSResult,
    CVVResult,
    NormalizedResult,
    StandardErrorCode,
)
from adyen_gateway.translation import authorization

AUTHORIZE_ACTIONS = frozenset({"payments", "authorise"})
MODIFICATION_ACTIONS = frozenset({"capture", "refund", "cancel"})

SUCCESSFUL_RESULT_CODES = frozenset({"Authorised", "Received", "RedirectShopper"})

STANDARD_ERROR_CODE_MAPPING = MappingProxyType({
    "101": StandardErrorCode.INCORRECT_NUMBER,
    "103": StandardErrorCode.INVALID_CVC,
    "131": StandardErrorCode.INCORRECT_ADDRESS,
    "132": StandardErrorCode.INCORRECT_ADDRESS,
    "133": StandardErrorCode.INCORRECT_ADDRESS,
    "134": StandardErrorCode.INCORRECT_ADDRESS,
    "135": StandardErrorCode.INCORRECT_ADDRESS,
})

AVS_MAPPING = MappingProxyType({
    "0": "R",  # Unknown
    "1": "A",  # Address matches, postal code doesn't
    "2": "N",  # Neither postal code nor address match
    "3": "R",  # AVS unavailable
    "4": "E",  # AVS not supported for this card type
    "5": "U",  # No AVS data provided
    "6": "Z",  # Postal code matches, address doesn't match
    "7": "D",  # Both postal code and address match
    "8": "U",  # Address not checked, postal code unknown
    "9": "B",  # Address matches, postal code unknown
    "10": "N",  # Address doesn't match, postal code unknown
    "11": "U",  # Postal code not checked, address unknown
    "12": "B",  # Address matches, postal code not checked
    "13": "U",  # Address doesn't match, postal code not checked
    "14": "P",  # Postal code matches, address unknown
    "15": "P",  # Postal code matches, address not checked
    "16": "N",  # Postal code doesn't match, address unknown
    "17": "U",  # Postal code doesn't match, address not checked
    "18": "I",  # Neither postal code nor address were checked
})

CVC_MAPPING = MappingProxyType({
    "0": "P",  # Unknown
    "1": "M",  # Matches
    "2": "N",  # Does not match
    "3": "P",  # Not checked
    "4": "S",  # No CVC/CVV provided, but was required
    "5": "U",  # Issuer not certified for CVC/CVV
    "6": "P",  # No CVC/CVV provided
})

RECURRING_DETAIL_REFERENCE = "recurring.recurringDetailReference"


def parse(body: str | None) -> dict[str, Any]:
    """
    Parse a raw response body.

    Blank bodies parse to an empty dict. Bodies that are not a JSON object
    parse to a dict carrying an explanatory message and the raw text.
    """
    if not body or not body.strip():
        return {}
    try:
        parsed = json.loads(body)
    except ValueError:
        parsed = None
    if not isinstance(parsed, dict):
        return {
            "message": "Invalid JSON response received from Adyen. Please contact support.",
            "body": body,
        }
    return parsed


def _additional_data(response: Mapping[str, Any]) -> Mapping[str, Any]:
    additional_data = response.get("additionalData")
    return additional_data if isinstance(additional_data, Mapping) else {}


def success_from(action: str, response: Mapping[str, Any]) -> bool:
    if action in AUTHORIZE_ACTIONS:
        return response.get("resultCode") in SUCCESSFUL_RESULT_CODES
    if action in MODIFICATION_ACTIONS:
        return response.get("response") in (f"[{action}-received]", f"{action}-received")
    return False


def message_from(action: str, response: Mapping[str, Any]) -> str | None:
    if action in AUTHORIZE_ACTIONS:
        return authorize_message_from(response)
    return response.get("response") or response.get("message")


def authorize_message_from(response: Mapping[str, Any]) -> str | None:
    refusal_reason = response.get("refusalReason")
    refusal_reason_raw = _additional_data(response).get("refusalReasonRaw")
    if refusal_reason and refusal_reason_raw:
        return f"{refusal_reason} | {refusal_reason_raw}"
    return refusal_reason or response.get("resultCode") or response.get("message")


def error_code_from(response: Mapping[str, Any]) -> StandardErrorCode | None:
    error_code = response.get("errorCode")
    if error_code is None:
        return None
    return STANDARD_ERROR_CODE_MAPPING.get(str(error_code))


def avs_code_from(response: Mapping[str, Any]) -> str | None:
    avs_result = _additional_data(response).get("avsResult")
    if not avs_result:
        return None
    return AVS_MAPPING.get(str(avs_result)[:2].strip())


def cvv_code_from(response: Mapping[str, Any]) -> str | None:
    cvc_result = _additional_data(response).get("cvcResult")
    if not cvc_result:
        return None
    return CVC_MAPPING.get(str(cvc_result)[0])


def authorization_from(
    request: Mapping[str, Any],
    response: Mapping[str, Any],
) -> str | None:
    psp_reference = response.get("pspReference")
    if not psp_reference:
        return None
    return authorization.encode(
        request.get("originalReference"),
        psp_reference,
        _additional_data(response).get(RECURRING_DETAIL_REFERENCE),
    )


def interpret(
    action: str,
    request: Mapping[str, Any],
    response: dict[str, Any],
    test: bool = False,
) -> NormalizedResult:
    """
    Normalize one Adyen response.

    Args:
        action: Adyen action the request was sent to
            ("payments", "authorise", "capture", "refund", "cancel")
        request: Outbound request body (supplies the known original reference)
        response: Parsed response body
        test: Whether the gateway runs against the test environment

    Returns:
        NormalizedResult; the error code is only derived for failures
    """
    success = success_from(action, response)
    avs_code = avs_code_from(response)
    cvv_code = cvv_code_from(response)

    return NormalizedResult(
        success=success,
        message=message_from(action, response),
        raw=response,
        authorization=authorization_from(request, response),
        error_code=None if success else error_code_from(response),
        avs_result=AVSResult(avs_code) if avs_code else None,
        cvv_result=CVVResult(cvv_code) if cvv_code else None,
        test=test,
    )
