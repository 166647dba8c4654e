"""
Provider fallback orchestrator.

Tries each provider in priority order and stops at the first success.

Invariants:
- Strictly sequential: one provider call in flight per request
- Providers after the first success are never invoked
- No retries inside the chain (a wrapping caller may retry the whole solve)
- Every failure is recorded, in order, for diagnostics
"""

import logging
from typing import List, Sequence

from providers import ProviderClient

from .types import AttemptRecord, ProviderSpec, SolveOutcome

logger = logging.getLogger(__name__)


class FallbackOrchestrator:
    """
    Runs the fallback chain for one question at a time.

    The chain is fixed at construction; concurrent solve() calls share it
    read-only.

    Usage:
        orchestrator = FallbackOrchestrator(specs)
        outcome = await orchestrator.solve("What is 6 * 7?")
    """

    def __init__(self, providers: Sequence[ProviderSpec]):
        # sorted() is stable, so equal priorities keep their given order
        self._providers = tuple(sorted(providers, key=lambda spec: spec.priority))

    @classmethod
    def from_clients(cls, clients: Sequence[ProviderClient]) -> "FallbackOrchestrator":
        """Build a chain whose priority is the position in `clients`."""
        return cls(
            [
                ProviderSpec(name=client.name, priority=index, client=client)
                for index, client in enumerate(clients)
            ]
        )

    @property
    def providers(self) -> Sequence[ProviderSpec]:
        return self._providers

    @property
    def provider_names(self) -> List[str]:
        return [spec.name for spec in self._providers]

    async def solve(self, question: str) -> SolveOutcome:
        """
        Solve a question using the first provider that succeeds.

        Returns:
            SolveOutcome(status="solved") from the first successful provider,
            or SolveOutcome(status="all_failed") carrying every attempt.
        """
        attempts: List[AttemptRecord] = []

        for spec in self._providers:
            result = await spec.client.attempt(question)

            if result.ok:
                logger.info(
                    f"Solved by {spec.name} after {len(attempts)} failed attempt(s)"
                )
                return SolveOutcome.solved_by(spec.name, result.output, tuple(attempts))

            attempts.append(AttemptRecord(provider_name=spec.name, failure=result.failure))
            logger.warning(f"{spec.name} failed: {result.failure}, moving on")

        outcome = SolveOutcome.all_failed(tuple(attempts))
        logger.error(f"All providers failed to provide a solution: {outcome.describe_attempts()}")
        return outcome
