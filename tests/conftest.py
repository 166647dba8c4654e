"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

PROVIDER_ENV_VARS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "WOLFRAM_API_KEY",
    "HF_API_KEY",
    "HF_MODEL",
    "PROVIDER_TIMEOUT_S",
    "PROVIDER_MODE",
)


@pytest.fixture(autouse=True)
def reset_bootstrap():
    """Every test starts without a cached provider chain."""
    from infra.bootstrap import InfraBootstrap

    InfraBootstrap.reset()
    yield
    InfraBootstrap.reset()


@pytest.fixture
def clean_provider_env(monkeypatch):
    """Remove provider settings that a developer's .env may have loaded."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
