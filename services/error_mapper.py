# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

CONNECTION_ERROR = "Unable to reach the server. Check your connection and try again."
TIMEOUT_ERROR = "The server took too long to respond. Please try again."


def map_api_error(error: ApiException, fallback: str) -> str:
    """Map API exception to the message shown to the operator.

    The service's own `error` text is shown verbatim; otherwise the
    operation's fallback message is used.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")

    return error.server_message or fallback


def map_network_error(error: NetworkException) -> str:
    """Map network exception to a user-friendly message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return TIMEOUT_ERROR
    return CONNECTION_ERROR


def map_exception(error: Exception, fallback: str, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Args:
        error: The exception raised by the API layer
        fallback: Generic message for the failed operation
            (e.g. "Failed to load customers")
        context: Optional context recorded on API errors
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error, fallback)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message or fallback

    logger.warning(f"Unexpected error: {error}")
    return fallback


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    return response_data.get("error", "")
