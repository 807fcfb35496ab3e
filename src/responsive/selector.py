"""Breakpoint selection.

``select`` picks the populated slot with the greatest threshold not
exceeding the scalar. When the scalar is below every populated threshold the
smallest populated slot is used instead, so a set providing only ``sm`` and
``md`` still yields ``sm`` for a 300px window. Only a set without any
populated slot is unresolvable.

Selection never invokes a payload; realizing a lazy payload is left to the
caller.
"""

from __future__ import annotations

from typing import TypeVar

from .breakpoints import BreakpointSet, Slot, coerce_scalar
from .errors import UnresolvableSelection

__all__ = ["select", "choose"]

P = TypeVar("P")


def select(breakpoints: BreakpointSet[P], scalar: float) -> Slot[P]:
    """Return the slot that applies at ``scalar``.

    Raises
    ------
    UnresolvableSelection
        If ``breakpoints`` has no populated slot.
    TypeError, ValueError
        If ``scalar`` is not a real number or is NaN.
    """
    x = coerce_scalar(scalar)
    slots = breakpoints.slots()
    if not slots:
        raise UnresolvableSelection(
            "Breakpoint set has no populated slot to select", context={"scalar": x}
        )
    for slot in reversed(slots):
        if slot.threshold <= x:
            return slot
    return slots[0]


def choose(breakpoints: BreakpointSet[P], scalar: float) -> P:
    """Return the payload that applies at ``scalar`` (see ``select``)."""
    return select(breakpoints, scalar).payload
