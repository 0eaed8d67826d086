"""HTTP transport for the Adyen API."""

import json
import uuid
from typing import Any

import httpx
import structlog

from adyen_gateway.models.exceptions import TransportError
from adyen_gateway.translation.scrubbing import scrub

logger = structlog.get_logger(__name__)


class AdyenClient:
    """
    Thin synchronous transport for Adyen's JSON endpoints.

    Sends one POST per call and performs no retries: callers that want a
    retry re-invoke the whole gateway operation. Non-2xx responses raise
    TransportError carrying the body so the gateway can still interpret
    Adyen's error payload.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        log_transcripts: bool = False,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the Adyen client.

        Args:
            timeout_seconds: Request timeout in seconds (default: 10.0)
            log_transcripts: Log scrubbed request/response transcripts at debug level
            http_client: Optional preconfigured httpx client
        """
        self.timeout_seconds = timeout_seconds
        self.log_transcripts = log_transcripts
        self.http_client = http_client or httpx.Client(timeout=timeout_seconds)

    def close(self) -> None:
        """Close the HTTP client connection pool."""
        self.http_client.close()

    def post(self, url: str, payload: dict[str, Any], headers: dict[str, str]) -> str:
        """
        POST a JSON payload and return the raw response body.

        Args:
            url: Full endpoint URL
            payload: Request body, serialized as JSON
            headers: Request headers (content type and API key)

        Returns:
            Raw response body text

        Raises:
            TransportError: Non-2xx status (with body), timeout or network
                error (without body)
        """
        correlation_id = str(uuid.uuid4())
        body = json.dumps(payload)

        logger.info("adyen_request_sending", url=url, correlation_id=correlation_id)

        try:
            response = self.http_client.post(
                url,
                headers={**headers, "X-Request-ID": correlation_id},
                content=body,
            )
        except httpx.TimeoutException as e:
            logger.error(
                "adyen_request_timeout",
                url=url,
                correlation_id=correlation_id,
                error=str(e),
            )
            raise TransportError(f"Adyen request timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(
                "adyen_request_error",
                url=url,
                correlation_id=correlation_id,
                error=str(e),
            )
            raise TransportError(f"Adyen request error: {e}") from e

        self._log_transcript(url, headers, body, response)

        if response.status_code >= 300:
            logger.warning(
                "adyen_error_status",
                url=url,
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            raise TransportError(
                f"Adyen returned status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.info(
            "adyen_response_received",
            url=url,
            status_code=response.status_code,
            correlation_id=correlation_id,
        )
        return response.text

    def _log_transcript(
        self,
        url: str,
        headers: dict[str, str],
        body: str,
        response: httpx.Response,
    ) -> None:
        if not self.log_transcripts:
            return
        header_lines = "\n".join(f"{name}: {value}" for name, value in headers.items())
        transcript = (
            f"POST {url}\n{header_lines}\n\n{body}\n"
            f"<- {response.status_code}\n{response.text}"
        )
        logger.debug("adyen_transcript", transcript=scrub(transcript))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
