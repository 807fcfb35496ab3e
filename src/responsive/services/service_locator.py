"""Service locator for shared responsive infrastructure.

Adapters look up the event bus and the shared selection tracker by name, so
a host application registers them once at startup:

    from responsive.services.service_locator import services
    services.register('event_bus', EventBus())
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when a key is registered twice without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested key is not registered."""


class ServiceLocator:
    """Thread-safe string-keyed registry."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._values: Dict[str, Any] = {}

    def register(self, key: str, value: Any, *, allow_override: bool = False) -> None:
        with self._lock:
            if key in self._values and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._values[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._values:
                raise ServiceNotFoundError(key)
            return self._values[key]

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()


services = ServiceLocator()
