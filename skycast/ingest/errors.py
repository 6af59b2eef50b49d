"""Typed fetch failures and their mapping to user-facing messages."""

import asyncio
import logging

import httpx

from skycast.config.schema import MessagesConfig
from skycast.ingest.validation import sanitize_text

logger = logging.getLogger(__name__)


class WeatherApiError(Exception):
    """Raised when the weather API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class MalformedResponseError(Exception):
    """Raised when a success body does not have the expected shape."""


def classify_error(exc: BaseException, messages: MessagesConfig) -> str:
    """Map a fetch failure to a sanitized message; never exposes raw detail."""
    if isinstance(exc, WeatherApiError):
        if exc.status_code == 404:
            message = messages.city_not_found
        elif exc.status_code == 429:
            message = messages.api_limit
        elif exc.status_code == 401:
            message = messages.invalid_api_key
        else:
            message = messages.unknown_error
    elif isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        message = messages.timeout_error
    elif isinstance(exc, httpx.TransportError):
        message = messages.network_error
    else:
        logger.warning("Unclassified failure %s: %s", type(exc).__name__, exc)
        message = messages.unknown_error
    return sanitize_text(message)
