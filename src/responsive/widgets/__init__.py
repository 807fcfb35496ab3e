"""PyQt6 adapters feeding measured widget sizes into breakpoint selection."""

from .responsive_layout import ResponsiveLayout, responsive_value  # noqa: F401

__all__ = ["ResponsiveLayout", "responsive_value"]
