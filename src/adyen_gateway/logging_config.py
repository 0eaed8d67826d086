"""
Structured logging for the Adyen gateway.

Every event passes through ``scrub_sensitive_values`` so card numbers,
verification codes, cryptograms and API keys never reach a log sink, even
when a caller binds a raw request body or transcript to a logger.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from adyen_gateway.translation.scrubbing import scrub


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Use the bound order reference as correlation ID when none is set."""
    if "correlation_id" not in event_dict and event_dict.get("order_id"):
        event_dict["correlation_id"] = event_dict["order_id"]
    return event_dict


def scrub_sensitive_values(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Redact credentials and card data from every string value of an event."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = scrub(value)
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
    include_correlation_id: bool = True,
) -> None:
    """
    Configure structlog for applications embedding the gateway.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: Render JSON lines; otherwise use the console renderer
        include_correlation_id: Derive correlation IDs from order references
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if include_correlation_id:
        processors.append(add_correlation_id)

    # Redaction must directly precede rendering
    processors.append(scrub_sensitive_values)
    processors.append(
        structlog.processors.JSONRenderer() if format_as_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

