"""Structured errors for breakpoint construction and selection."""

from __future__ import annotations
from typing import Any


class ResponsiveError(Exception):
    """Base class for breakpoint related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class UnresolvableSelection(ResponsiveError):
    """Raised when a selection is requested from a set with no populated slots."""


class InvalidThresholdError(ResponsiveError, ValueError):
    """Raised when a custom threshold is not a real, comparable number."""
