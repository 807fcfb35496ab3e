"""Scalar sources for layout adapters.

A source reads the measurement a selection is made against. Two are
provided:

 - ``window_extent``: size of the widget's top-level window (screen-size
   driven layouts).
 - ``constraint_extent``: size granted to the widget itself by its parent
   layout (container driven layouts).

Sources are duck-typed on the Qt size API (``size().width()``) so they can
be exercised headlessly with simple fakes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol

__all__ = ["Axis", "ScalarSource", "window_extent", "constraint_extent"]


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: "str | Axis") -> "Axis":
        if isinstance(value, Axis):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown axis: {value!r}") from None

    def extent(self, size: Any) -> float:
        return size.width() if self is Axis.HORIZONTAL else size.height()


class ScalarSource(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, widget: Any, axis: Axis) -> float: ...  # pragma: no cover - structural


def window_extent(widget: Any, axis: Axis) -> float:
    return axis.extent(widget.window().size())


def constraint_extent(widget: Any, axis: Axis) -> float:
    return axis.extent(widget.size())
