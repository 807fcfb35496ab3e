"""Configuration for responsive layout adapters.

Environment variables provide process-wide defaults; ``ResponsiveSettings``
holds the runtime values adapters consult. The shared instance is created on
first use by ``ResponsiveSettings.get()``, so a bad environment value
surfaces there rather than when the package is imported. Tests and
application bootstrap may assign ``ResponsiveSettings.instance`` directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import ClassVar, Final, Optional, Tuple

from .sources import Axis

AXIS_ENV_VAR: Final = "RESPONSIVE_DEFAULT_AXIS"
ON_UNRESOLVABLE_ENV_VAR: Final = "RESPONSIVE_ON_UNRESOLVABLE"

# "raise": propagate UnresolvableSelection to the caller
# "placeholder": log, publish selection_failed and show an empty widget
UNRESOLVABLE_POLICIES: Final[Tuple[str, ...]] = ("raise", "placeholder")


@dataclass
class ResponsiveSettings:
    """Runtime settings for layout adapters.

    Attributes:
        default_axis: Axis measured when an adapter is created without one.
        on_unresolvable: What an adapter does when its breakpoint set has no
            populated slot; one of ``UNRESOLVABLE_POLICIES``.
        publish_events: When True, selection changes and failures are
            published on the registered event bus.
        log_selections: When True, selection changes are logged at DEBUG.
    """

    instance: ClassVar[Optional["ResponsiveSettings"]] = None

    default_axis: Axis = field(
        default_factory=lambda: os.environ.get(AXIS_ENV_VAR, Axis.HORIZONTAL.value)
    )
    on_unresolvable: str = field(
        default_factory=lambda: os.environ.get(ON_UNRESOLVABLE_ENV_VAR, "raise")
    )
    publish_events: bool = True
    log_selections: bool = True

    def __post_init__(self) -> None:
        self.default_axis = Axis.parse(self.default_axis)
        if self.on_unresolvable not in UNRESOLVABLE_POLICIES:
            raise ValueError(
                f"on_unresolvable must be one of {UNRESOLVABLE_POLICIES}, "
                f"got {self.on_unresolvable!r}"
            )

    @classmethod
    def get(cls) -> "ResponsiveSettings":
        if cls.instance is None:
            cls.instance = cls()
        return cls.instance
