"""Configure pytest environment for all tests."""

import sys
from pathlib import Path

import pytest

# Get absolute paths
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from chirp import registry  # noqa: E402
from chirp.config import ChirpConfig, reset_config, set_config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Give each test its own copy of the type registry."""
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    yield


@pytest.fixture(autouse=True)
def default_config():
    """Run each test against the default configuration."""
    set_config(ChirpConfig())
    yield
    reset_config()
