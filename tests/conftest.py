"""Global pytest configuration and fixtures."""

# Third-party imports
import pytest

# Local imports
from sidecar.infrastructure.config import BuilderConfig, reset_builder_config
from sidecar.infrastructure.database import ClauseBuilder

SIDECAR_ENV_VARS = [
    "SIDECAR_DEFAULT_SANITIZER",
    "SIDECAR_DEFAULT_JOINER",
    "SIDECAR_FRAGMENT_SEPARATOR",
    "SIDECAR_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from SIDECAR_* variables and the cached config."""
    for name in SIDECAR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_builder_config()
    yield
    reset_builder_config()


@pytest.fixture
def builder_config() -> BuilderConfig:
    """Provides default builder configuration."""
    return BuilderConfig()


@pytest.fixture
def builder(builder_config) -> ClauseBuilder:
    """Provides a fresh clause builder."""
    return ClauseBuilder(config=builder_config)
