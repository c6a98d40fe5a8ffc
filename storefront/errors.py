"""Exceptions raised by storefront components."""

from __future__ import annotations

from typing import Any


class StorefrontError(Exception):
    """Base exception for storefront errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgument(StorefrontError, ValueError):
    """A component was given configuration or records it cannot be built from.

    Raised at construction time so a widget or model never exists in a
    half-valid state.
    """
