"""Standardized AVS and CVV verification results."""

from dataclasses import dataclass

AVS_MESSAGES = {
    "A": "Street address matches, but postal code does not match.",
    "B": "Street address matches, but postal code not verified.",
    "D": "Street address and postal code match.",
    "E": "AVS data is invalid or AVS is not allowed for this card type.",
    "I": "Address not verified.",
    "N": "Street address and postal code do not match.",
    "P": "Postal code matches, but street address not verified.",
    "R": "System unavailable.",
    "U": "Address information unavailable.",
    "Z": "Street address does not match, but postal code matches.",
}

# code -> (street_match, postal_match); "Y" match, "N" no match, None unknown
AVS_MATCHES = {
    "A": ("Y", "N"),
    "B": ("Y", None),
    "D": ("Y", "Y"),
    "N": ("N", "N"),
    "P": (None, "Y"),
    "Z": ("N", "Y"),
}

CVV_MESSAGES = {
    "M": "CVV matches",
    "N": "CVV does not match",
    "P": "Not processed",
    "S": "Should have been present",
    "U": "Issuer unable to process request",
}


@dataclass(frozen=True)
class AVSResult:
    """Address verification outcome, keyed by a standardized single-letter code."""

    code: str

    @property
    def message(self) -> str | None:
        return AVS_MESSAGES.get(self.code)

    @property
    def street_match(self) -> str | None:
        return AVS_MATCHES.get(self.code, (None, None))[0]

    @property
    def postal_match(self) -> str | None:
        return AVS_MATCHES.get(self.code, (None, None))[1]


@dataclass(frozen=True)
class CVVResult:
    """Card verification code outcome."""

    code: str

    @property
    def message(self) -> str | None:
        return CVV_MESSAGES.get(self.code)
