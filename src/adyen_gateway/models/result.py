"""Normalized gateway results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from adyen_gateway.models.verification import AVSResult, CVVResult


class StandardErrorCode(str, Enum):
    """Processor-independent error categories."""

    INCORRECT_NUMBER = "incorrect_number"
    INVALID_CVC = "invalid_cvc"
    INCORRECT_ADDRESS = "incorrect_address"


@dataclass(frozen=True)
class NormalizedResult:
    """
    Outcome of one gateway operation.

    This is the uniform contract returned for every primitive and composite
    operation. Processor declines are failed results, never exceptions.

    Attributes:
        success: Whether the processor's success criterion was met
        message: Human-readable message derived from the response
        raw: Parsed processor response body
        authorization: Composite reference token for follow-up operations
        error_code: Standardized error category on mappable failures
        avs_result: Standardized address verification result
        cvv_result: Standardized card verification code result
        test: Whether the response came from the test environment
    """

    success: bool
    message: str | None
    raw: dict[str, Any] = field(default_factory=dict)
    authorization: str | None = None
    error_code: StandardErrorCode | None = None
    avs_result: AVSResult | None = None
    cvv_result: CVVResult | None = None
    test: bool = False
