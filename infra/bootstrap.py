"""
Infrastructure initialization and bootstrap.

Singleton pattern for building the fallback chain once per process.
"""

import logging
from typing import Optional

from api.handler import SolveRequestHandler
from solver import FallbackOrchestrator

from .config import InfraConfig, get_config

logger = logging.getLogger(__name__)


class InfraBootstrap:
    """
    Bootstrap the provider chain based on configuration.

    Singleton pattern - single instance per process.
    """

    _instance: Optional["InfraBootstrap"] = None

    def __init__(self, config: Optional[InfraConfig] = None):
        """Initialize bootstrap with configuration."""
        self.config = config or get_config()
        self.provider_specs = self.config.create_provider_specs()
        self.orchestrator = FallbackOrchestrator(self.provider_specs)
        self.request_handler = SolveRequestHandler(self.orchestrator)
        logger.info(f"Fallback chain ready: {self!r}")

    @classmethod
    def get_instance(cls, config: Optional[InfraConfig] = None) -> "InfraBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton InfraBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    def get_orchestrator(self) -> FallbackOrchestrator:
        return self.orchestrator

    def get_request_handler(self) -> SolveRequestHandler:
        return self.request_handler

    def __repr__(self) -> str:
        """String representation showing the chain and credential state."""
        status = self.config.credentials_status()
        chain = " -> ".join(
            f"{name}{'' if status.get(name) else ' (not configured)'}"
            for name in self.orchestrator.provider_names
        )
        return f"InfraBootstrap(mode={self.config.provider_mode}, chain={chain or 'empty'})"


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> InfraBootstrap:
    """
    Bootstrap the provider chain.

    Args:
        config: Optional custom configuration

    Returns:
        InfraBootstrap instance with the orchestrator initialized
    """
    return InfraBootstrap.get_instance(config)
