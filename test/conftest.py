"""
Shared pytest configuration and fixtures for the confreg tests.
"""

import pytest

from confreg import (
    ConfigRegistry, ConfigVariable,
    int_ranged, float_ranged, string_non_empty, boolean
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without file system access")
    config.addinivalue_line("markers", "integration: tests that read and write config documents")


@pytest.fixture
def registry():
    """An empty registry, independent from the process-wide one."""
    return ConfigRegistry()


@pytest.fixture
def populated_registry(registry):
    """
    Registry with one variable of each supported type, some of them nested.
    """
    registry.register(ConfigVariable("server.host", "localhost", string_non_empty(),
                                     description="Address to bind"))
    registry.register(ConfigVariable("server.port", 8080, int_ranged(1, 65535),
                                     description="Listening port"))
    registry.register(ConfigVariable("limits.ratio", 0.5, float_ranged(0.0, 1.0)))
    registry.register(ConfigVariable("debug", False, boolean()))
    registry.register(ConfigVariable("build.id", "abc123", string_non_empty(), read_only=True))
    return registry


@pytest.fixture
def default_registry(monkeypatch):
    """Fresh process-wide registry, restored after the test."""
    monkeypatch.setattr(ConfigRegistry, "_instance", None)
    monkeypatch.delenv("CONFREG_CONFIG_PATH", raising=False)
    return ConfigRegistry.instance()
