"""Custom exceptions for the Adyen gateway adapter."""


class GatewayError(Exception):
    """Base exception for gateway-related errors."""

    pass


class RequestValidationError(GatewayError):
    """
    Raised when a request cannot be built from the caller's input.

    This is a construction-time error: no network call has been attempted.
    Processor declines are NOT raised; they come back as failed results.
    """

    pass


class MissingFieldError(RequestValidationError):
    """Raised when required request fields are missing or blank."""

    def __init__(self, *fields: str) -> None:
        self.fields = fields
        super().__init__(f"Missing required parameter: {', '.join(fields)}")


class GatewayConfigurationError(RequestValidationError):
    """
    Raised when the gateway configuration cannot produce a request.

    Examples:
    - Blank API key or merchant account
    - Live mode without a merchant-specific endpoint prefix
    """

    pass


class TransportError(GatewayError):
    """
    Raised by the transport shim when the HTTP exchange fails.

    Carries the processor's response body when one was received (non-2xx
    status), or None for timeouts and connection errors.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
