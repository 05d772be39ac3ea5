"""
Translation of vendor errors into the spotaddon exception hierarchy.

Vendor calls are made exactly once. The decorator only classifies what
went wrong so the service layer can react to one family of exceptions.
"""

import logging
from functools import wraps
from typing import Callable

import spotipy
from requests.exceptions import RequestException

from .exceptions import (
    SpotifyAPIError,
    SpotifyError,
    SpotifyNotFoundError,
    SpotifyRateLimitError,
    SpotifyTokenExpiredError,
)

logger = logging.getLogger(__name__)


def _classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Returns one of: 'not_found', 'token_expired', 'rate_limited',
    'server_error', 'client_error', 'network_error', 'unexpected'.
    """
    if isinstance(exception, spotipy.SpotifyException):
        if exception.http_status == 404:
            return "not_found"
        elif exception.http_status == 401:
            return "token_expired"
        elif exception.http_status == 429:
            return "rate_limited"
        elif exception.http_status is not None and exception.http_status >= 500:
            return "server_error"
        else:
            return "client_error"
    elif isinstance(exception, RequestException):
        return "network_error"
    else:
        return "unexpected"


def _translate(exception: Exception, func_name: str) -> SpotifyError:
    """Build the spotaddon exception that replaces ``exception``."""
    category = _classify_error(exception)
    msg = getattr(exception, "msg", None) or str(exception)

    if category == "not_found":
        return SpotifyNotFoundError(f"Resource not found: {msg}")
    if category == "token_expired":
        return SpotifyTokenExpiredError(f"Token expired or invalid: {msg}")
    if category == "rate_limited":
        retry_after = None
        headers = getattr(exception, "headers", None)
        if headers and headers.get("Retry-After"):
            # Retry-After may also be an HTTP date; only delta-seconds are kept
            try:
                retry_after = int(headers["Retry-After"])
            except (TypeError, ValueError):
                retry_after = None
        message = f"Rate limited: {msg}"
        if retry_after is not None:
            message += f" (retry after {retry_after}s)"
        return SpotifyRateLimitError(message, retry_after=retry_after)
    if category == "network_error":
        logger.error("Network error in %s: %s", func_name, exception)
        return SpotifyAPIError(f"Network error: {exception}")
    if category == "unexpected":
        logger.error(
            "Unexpected error in %s: %s", func_name, exception, exc_info=True
        )
        return SpotifyAPIError(f"Unexpected error: {exception}")

    logger.error("Spotify API error in %s: %s", func_name, exception)
    return SpotifyAPIError(f"API error: {msg}")


def api_error_handler(func: Callable) -> Callable:
    """
    Decorator converting spotipy / requests failures into SpotifyError.

    Exceptions that already belong to the hierarchy pass through unchanged.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SpotifyError:
            raise
        except Exception as e:
            raise _translate(e, func.__name__) from e

    return wrapper
