"""Responsive breakpoint sets.

A breakpoint set associates payloads with inclusive lower thresholds on a
runtime scalar (typically a window width). Presentation code builds one set
of alternatives and lets the selector pick the single alternative that
applies once the measured size is known.

Standard Scale
--------------
 - xs:  -inf   (always eligible, lowest priority)
 - sm:  >= 576
 - md:  >= 768
 - lg:  >= 992
 - xl:  >= 1200
 - xxl: >= 1400

Thresholds of the standard names are fixed; only their payloads are
settable. One-off thresholds can be supplied through the ``custom`` mapping.
A custom threshold equal to a standard one shadows the standard slot.

Sets are immutable once constructed and may be queried from any thread.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from .errors import InvalidThresholdError

__all__ = [
    "XS",
    "SM",
    "MD",
    "LG",
    "XL",
    "XXL",
    "STANDARD_NAMES",
    "Breakpoint",
    "BreakpointSet",
    "Slot",
    "list_breakpoints",
    "get_breakpoint",
    "classify",
    "coerce_scalar",
]

T = TypeVar("T")
U = TypeVar("U")

XS: float = -math.inf
SM: float = 576
MD: float = 768
LG: float = 992
XL: float = 1200
XXL: float = 1400

STANDARD_NAMES: Tuple[str, ...] = ("xs", "sm", "md", "lg", "xl", "xxl")


@dataclass(frozen=True)
class Breakpoint:
    """Standard named threshold.

    Attributes
    ----------
    name: str
        Semantic identifier (xs|sm|md|lg|xl|xxl).
    threshold: float
        Inclusive lower bound; ``-inf`` for xs.
    description: str
        Typical device class for the bracket.
    """

    name: str
    threshold: float
    description: str


_REGISTRY: Dict[str, Breakpoint] = {}


def _register(bp: Breakpoint) -> None:
    if bp.name in _REGISTRY:
        raise ValueError(f"Duplicate breakpoint name: {bp.name}")
    _REGISTRY[bp.name] = bp


_register(Breakpoint("xs", XS, "Portrait phones; anything narrower than sm."))
_register(Breakpoint("sm", SM, "Landscape phones and narrow split windows."))
_register(Breakpoint("md", MD, "Tablets; baseline multi-column layouts."))
_register(Breakpoint("lg", LG, "Small desktops and laptops."))
_register(Breakpoint("xl", XL, "Desktop windows."))
_register(Breakpoint("xxl", XXL, "Wide desktop windows."))


def list_breakpoints() -> List[Breakpoint]:
    return sorted(_REGISTRY.values(), key=lambda b: b.threshold)


def get_breakpoint(name: str) -> Breakpoint:
    bp = _REGISTRY.get(name)
    if bp is None:
        raise KeyError(f"Unknown breakpoint name: {name}")
    return bp


def coerce_scalar(value: Any) -> float:
    """Validate a measured scalar; must be a real number other than NaN."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Scalar must be a real number, got {type(value).__name__}")
    if math.isnan(value):
        raise ValueError("Scalar must not be NaN")
    return value


def classify(scalar: float) -> Breakpoint:
    """Return the standard Breakpoint whose bracket contains ``scalar``."""
    x = coerce_scalar(scalar)
    ordered = list_breakpoints()
    for bp in reversed(ordered):
        if bp.threshold <= x:
            return bp
    return ordered[0]


def _check_threshold(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or math.isnan(value):
        raise InvalidThresholdError(
            f"Custom threshold must be a real number, got {value!r}",
            context={"threshold": value},
        )


@dataclass(frozen=True)
class Slot(Generic[T]):
    """A populated (threshold, payload) pair.

    ``name`` is the standard name (``"md"``) or ``"custom:<threshold>"``.
    """

    name: str
    threshold: float
    payload: T

    def as_pair(self) -> Tuple[float, T]:
        return (self.threshold, self.payload)


@dataclass(frozen=True)
class BreakpointSet(Generic[T]):
    """Immutable set of optional payloads keyed by threshold.

    ``None`` marks an unpopulated slot, for the named fields as well as for
    values of ``custom``.

    Example::

        BreakpointSet(sm="phone", md="tablet", xl="desktop", custom={1600: "wall"})
    """

    xs: Optional[T] = None
    sm: Optional[T] = None
    md: Optional[T] = None
    lg: Optional[T] = None
    xl: Optional[T] = None
    xxl: Optional[T] = None
    custom: Optional[Mapping[float, Optional[T]]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        entries = dict(self.custom or {})
        for key in entries:
            _check_threshold(key)
        ordered = {key: entries[key] for key in sorted(entries)}
        object.__setattr__(self, "custom", MappingProxyType(ordered))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def map(self, transform: Callable[[T], U]) -> "BreakpointSet[U]":
        """Apply ``transform`` to every populated payload.

        Unpopulated slots stay unpopulated and thresholds are carried over
        untouched; ``transform`` never sees a threshold. A transform returning
        None for a populated payload raises TypeError.
        """

        def apply(value: Optional[T]) -> Optional[U]:
            if value is None:
                return None
            result = transform(value)
            if result is None:
                raise TypeError(f"map transform returned None for payload {value!r}")
            return result

        named = {name: apply(getattr(self, name)) for name in STANDARD_NAMES}
        return BreakpointSet(
            **named,
            custom={key: apply(value) for key, value in self.custom.items()},
        )

    def slots(self) -> List[Slot[T]]:
        """Populated slots in ascending threshold order.

        Custom entries replace a standard entry with the same threshold.
        """
        merged: Dict[float, Slot[T]] = {}
        for name in STANDARD_NAMES:
            payload = getattr(self, name)
            if payload is not None:
                threshold = _REGISTRY[name].threshold
                merged[threshold] = Slot(name, threshold, payload)
        for threshold, payload in self.custom.items():
            if payload is not None:
                merged[threshold] = Slot(f"custom:{threshold}", threshold, payload)
        return [merged[key] for key in sorted(merged)]

    def enumerate(self) -> List[Tuple[float, T]]:
        """Ascending ``(threshold, payload)`` pairs of populated slots."""
        return [slot.as_pair() for slot in self.slots()]

    def is_empty(self) -> bool:
        return not self.slots()

    def __len__(self) -> int:
        return len(self.slots())
