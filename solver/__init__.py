"""Fallback chain: data model and orchestrator."""

from .types import AttemptRecord, ProviderSpec, SolveOutcome, SolveStatus
from .orchestrator import FallbackOrchestrator

__all__ = [
    "AttemptRecord",
    "ProviderSpec",
    "SolveOutcome",
    "SolveStatus",
    "FallbackOrchestrator",
]
