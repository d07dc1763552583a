# -*- coding: utf-8 -*-
"""
Customer Desk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "CustomerApiClient",
    "get_api_client",
    "ValidationFactory",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("CustomerApiClient", "get_api_client"):
        from . import api_client
        return getattr(api_client, name)
    elif name == "ValidationFactory":
        from .validation.validation_factory import ValidationFactory
        return ValidationFactory
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
