"""
Infrastructure module exports.

Configuration and bootstrap for the provider fallback chain.
"""

from .config import InfraConfig, get_config, ProviderModeType, PROVIDER_ORDER
from .bootstrap import InfraBootstrap, bootstrap_infrastructure

__all__ = [
    "InfraConfig",
    "get_config",
    "ProviderModeType",
    "PROVIDER_ORDER",
    "InfraBootstrap",
    "bootstrap_infrastructure",
]
