"""Transcript redaction for diagnostics."""

import re

FILTERED = "[FILTERED]"

_SCRUB_PATTERNS = (
    re.compile(r"(Authorization: Basic )[\w+/=]+", re.IGNORECASE),
    re.compile(r"(x-api-key: )\S+", re.IGNORECASE),
    re.compile(r'("number\\?":\s*\\?")[^"\\]*', re.IGNORECASE),
    re.compile(r'("cvc\\?":\s*\\?")[^"\\]*', re.IGNORECASE),
    re.compile(r'("cavv\\?":\s*\\?")[^"\\]*', re.IGNORECASE),
)


def scrub(transcript: str) -> str:
    """Replace credentials and card secrets in a request/response transcript."""
    for pattern in _SCRUB_PATTERNS:
        transcript = pattern.sub(lambda match: match.group(1) + FILTERED, transcript)
    return transcript
