"""Lazy payloads.

A builder is a callable taking a host context (for widgets, the parent the
result will live in) and returning the payload. Holding builders instead of
finished values means only the selected alternative is ever constructed.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .breakpoints import BreakpointSet
from .selector import choose

__all__ = ["Builder", "constant", "lazy", "realize", "resolve"]

T = TypeVar("T")

Builder = Callable[[Any], T]


def constant(value: T) -> Builder[T]:
    """Wrap an eager value in a builder that ignores its context."""

    def build(_context: Any = None) -> T:
        return value

    return build


def lazy(breakpoints: BreakpointSet[T]) -> BreakpointSet[Builder[T]]:
    return breakpoints.map(constant)


def realize(builder: Builder[T], context: Any = None) -> T:
    return builder(context)


def resolve(breakpoints: BreakpointSet[Builder[T]], scalar: float, context: Any = None) -> T:
    """Select the builder applying at ``scalar`` and invoke only that one."""
    return realize(choose(breakpoints, scalar), context)
