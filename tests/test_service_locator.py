import pytest
from responsive.services.service_locator import (
    services,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)


def test_register_and_get():
    services.register("event_bus", {"env": "test"})
    assert services.get("event_bus")["env"] == "test"


def test_double_register_requires_override():
    services.register("x", 1)
    with pytest.raises(ServiceAlreadyRegisteredError):
        services.register("x", 2)
    services.register("x", 3, allow_override=True)
    assert services.get("x") == 3


def test_missing_key():
    assert services.try_get("missing", 123) == 123
    with pytest.raises(ServiceNotFoundError):
        services.get("missing")
