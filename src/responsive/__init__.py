"""Responsive breakpoint selection public API.

Curated surface for callers choosing between alternative representations by
a measured size. The core (breakpoint sets, selection, lazy builders) has no
Qt dependency; the PyQt6 adapters live in ``responsive.widgets`` and are not
imported here so headless callers never load Qt.
"""

from __future__ import annotations

from .breakpoints import (  # noqa: F401
    XS,
    SM,
    MD,
    LG,
    XL,
    XXL,
    STANDARD_NAMES,
    Breakpoint,
    BreakpointSet,
    Slot,
    classify,
    get_breakpoint,
    list_breakpoints,
)
from .errors import InvalidThresholdError, ResponsiveError, UnresolvableSelection  # noqa: F401
from .lazy import Builder, constant, lazy, realize, resolve  # noqa: F401
from .selector import choose, select  # noqa: F401
from .settings import ResponsiveSettings  # noqa: F401
from .sources import Axis, constraint_extent, window_extent  # noqa: F401

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
    "classify",
    "get_breakpoint",
    "list_breakpoints",
    "InvalidThresholdError",
    "ResponsiveError",
    "UnresolvableSelection",
    "Builder",
    "constant",
    "lazy",
    "realize",
    "resolve",
    "choose",
    "select",
    "ResponsiveSettings",
    "Axis",
    "constraint_extent",
    "window_extent",
]
