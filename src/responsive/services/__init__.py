"""Shared infrastructure: service locator and event bus."""

from .service_locator import (  # noqa: F401
    services,
    ServiceLocator,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .event_bus import EventBus, Event, ResponsiveEvent, Subscription  # noqa: F401
