"""Widget that displays one of several alternatives based on available size.

The displayed child is chosen from a ``BreakpointSet`` using the greatest
populated threshold that the measured extent reaches; when the extent is
below every populated threshold the smallest populated slot is shown.

Two measurement modes share one implementation, differing only in the
scalar source:

 - window size (default): ``ResponsiveLayout(...)`` / ``ResponsiveLayout.builder(...)``
 - own size as granted by the parent layout:
   ``ResponsiveLayout.constraint(...)`` / ``ResponsiveLayout.constraint_builder(...)``

Example::

    ResponsiveLayout(
        BreakpointSet(
            sm=QLabel(">= 576"),
            md=QLabel(">= 768"),
            xl=QLabel(">= 1200"),
            custom={1600: QLabel(">= 1600")},
        )
    )

At 800px this shows the md label; at 1150px still md, because no lg slot was
provided. Builders avoid constructing alternatives that are never shown::

    ResponsiveLayout.builder(
        BreakpointSet(sm=lambda parent: CompactView(parent), lg=lambda parent: WideView(parent))
    )

Builder-produced children are deleted when replaced. Eager children are only
detached, since the breakpoint set keeps them for reuse.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Optional, TypeVar

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from ..breakpoints import BreakpointSet, Slot
from ..errors import UnresolvableSelection
from ..lazy import Builder, lazy, realize
from ..selector import choose, select
from ..settings import ResponsiveSettings
from ..sources import Axis, ScalarSource, constraint_extent, window_extent
from ..tracking import forget_selection, get_selection_tracker

__all__ = ["ResponsiveLayout", "responsive_value"]

T = TypeVar("T")

_keys = count(1)


class ResponsiveLayout(QWidget):
    """Container showing the breakpoint alternative that fits the measured extent.

    Parameters
    ----------
    breakpoints: BreakpointSet
        Widgets, or widget builders when ``builders`` is True.
    builders: bool
        Treat payloads as ``(parent) -> QWidget`` builders.
    axis: Axis | str | None
        Measured axis; defaults to ``ResponsiveSettings.default_axis``.
    source: ScalarSource
        Measurement function; ``window_extent`` or ``constraint_extent``.
    settings: ResponsiveSettings | None
        Overrides ``ResponsiveSettings.get()``.
    """

    def __init__(
        self,
        breakpoints: BreakpointSet[Any],
        *,
        builders: bool = False,
        axis: Axis | str | None = None,
        source: ScalarSource = window_extent,
        settings: ResponsiveSettings | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or ResponsiveSettings.get()
        self._axis = Axis.parse(axis if axis is not None else self._settings.default_axis)
        self._source = source
        self._owns_children = builders
        self._breakpoints: BreakpointSet[Builder[QWidget]] = (
            breakpoints if builders else lazy(breakpoints)
        )
        self._current: Optional[Slot[Builder[QWidget]]] = None
        self._child: Optional[QWidget] = None
        self._child_owned = False
        self._watched_window: Optional[QWidget] = None
        self._refreshing = False
        # unique per instance; id() values are recycled after deletion
        self._tracking_key = f"{type(self).__name__}-{next(_keys)}"
        self.destroyed.connect(_forget_on_destroy(self._tracking_key))
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._layout = layout

    # Alternate constructors ------------------------------------------
    @classmethod
    def builder(cls, breakpoints: BreakpointSet[Builder[QWidget]], **kwargs: Any) -> "ResponsiveLayout":
        return cls(breakpoints, builders=True, **kwargs)

    @classmethod
    def constraint(cls, breakpoints: BreakpointSet[QWidget], **kwargs: Any) -> "ResponsiveLayout":
        return cls(breakpoints, source=constraint_extent, **kwargs)

    @classmethod
    def constraint_builder(
        cls, breakpoints: BreakpointSet[Builder[QWidget]], **kwargs: Any
    ) -> "ResponsiveLayout":
        return cls(breakpoints, builders=True, source=constraint_extent, **kwargs)

    # Introspection ---------------------------------------------------
    @property
    def tracking_key(self) -> str:
        return self._tracking_key

    @property
    def axis(self) -> Axis:
        return self._axis

    def current_widget(self) -> Optional[QWidget]:
        return self._child

    def current_selection(self) -> Optional[Slot[Builder[QWidget]]]:
        return self._current

    def measure(self) -> float:
        return self._source(self, self._axis)

    # Selection -------------------------------------------------------
    def refresh(self) -> Optional[Slot[Builder[QWidget]]]:
        """Re-measure and swap the displayed child if the selected slot changed.

        Returns the selected slot, or None when the placeholder policy
        handled an empty breakpoint set.
        """
        if self._refreshing:
            return self._current
        self._refreshing = True
        try:
            return self._refresh()
        finally:
            self._refreshing = False

    def _refresh(self) -> Optional[Slot[Builder[QWidget]]]:
        scalar = self.measure()
        tracker = get_selection_tracker()
        try:
            selection = select(self._breakpoints, scalar)
        except UnresolvableSelection as exc:
            if self._settings.on_unresolvable == "raise":
                raise
            tracker.report_failure(self._tracking_key, scalar, exc)
            if self._current is not None or self._child is None:
                self._current = None
                self._swap(QWidget(), owned=True)
            return None
        if self._current is not None and self._current.name == selection.name:
            return self._current
        child = realize(selection.payload, self)
        self._swap(child, owned=self._owns_children)
        self._current = selection
        tracker.observe(self._tracking_key, selection, scalar)
        return selection

    def _swap(self, child: QWidget, *, owned: bool) -> None:
        previous = self._child
        if previous is child:
            return
        if previous is not None:
            self._layout.removeWidget(previous)
            previous.hide()
            if self._child_owned:
                previous.deleteLater()
            else:
                previous.setParent(None)
        self._layout.addWidget(child)
        child.show()
        self._child = child
        self._child_owned = owned

    # Qt event hooks --------------------------------------------------
    def showEvent(self, event):  # type: ignore[override]  # pragma: no cover - Qt glue
        window = self.window()
        if window is not self and window is not self._watched_window:
            if self._watched_window is not None:
                self._watched_window.removeEventFilter(self)
            window.installEventFilter(self)
            self._watched_window = window
        super().showEvent(event)
        self.refresh()

    def resizeEvent(self, event):  # type: ignore[override]
        super().resizeEvent(event)
        self.refresh()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: D401
        if obj is self._watched_window and event.type() == QEvent.Type.Resize:
            self.refresh()
        return super().eventFilter(obj, event)


def _forget_on_destroy(key: str):
    def forget(*_args: Any) -> None:
        forget_selection(key)

    return forget


def responsive_value(
    widget: QWidget, breakpoints: BreakpointSet[T], *, axis: Axis | str | None = None
) -> T:
    """Choose a plain value by the size of ``widget``'s window."""
    resolved = Axis.parse(axis if axis is not None else ResponsiveSettings.get().default_axis)
    return choose(breakpoints, window_extent(widget, resolved))
