"""
Authorization token codec.

An authorization token threads transaction state between calls. It holds up
to three ordered segments joined by ``#``:

    <original_reference>#<psp_reference>#<recurring_detail_reference>

A token without a delimiter is a bare single reference (for example a PSP
reference obtained outside this gateway) and is used as-is wherever a
reference is needed.
"""

from typing import NamedTuple

DELIMITER = "#"


class AuthorizationParts(NamedTuple):
    """Decoded authorization token segments; empty segments are None."""

    original_reference: str | None
    psp_reference: str | None
    recurring_reference: str | None


def encode(
    original_reference: str | None,
    psp_reference: str,
    recurring_reference: str | None = None,
) -> str:
    """Join the three references into a token, writing absent parts as empty."""
    return DELIMITER.join(
        [original_reference or "", psp_reference, recurring_reference or ""]
    )


def decode(token: str) -> AuthorizationParts:
    """
    Split a token into its segments.

    Missing trailing segments and empty segments decode to None. A bare token
    decodes to itself as the first segment.
    """
    segments = token.split(DELIMITER, 2)
    segments += [""] * (3 - len(segments))
    return AuthorizationParts(*(segment or None for segment in segments))


def single_reference(token: str) -> str | None:
    """Return the token itself when it is a bare reference, else None."""
    if DELIMITER in token:
        return None
    return token


def modification_reference(token: str) -> str | None:
    """Reference a capture or void targets: the bare value or the PSP segment."""
    return single_reference(token) or decode(token).psp_reference


def refund_reference(token: str) -> str | None:
    """Reference a refund targets: the bare value or the original segment."""
    return single_reference(token) or decode(token).original_reference
