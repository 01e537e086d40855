"""Structured color input errors raised by the contrast calculations."""

from __future__ import annotations
from typing import Any


class ContrastError(Exception):
    """Base class for color input issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidColorFormat(ContrastError, ValueError):
    """Raised when a hex string or RGB triple cannot be decoded into channels."""


class InvalidInputType(ContrastError, TypeError):
    """Raised when a color value is neither a hex string nor a 3-element triple."""
