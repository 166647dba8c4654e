"""
Fallback chain data model.

PURE DATA - NO LOGIC beyond small constructors.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from providers import ProviderClient, ProviderFailure

SolveStatus = Literal["solved", "all_failed"]


@dataclass(frozen=True)
class ProviderSpec:
    """
    One entry in the fallback chain.

    Built once at startup and shared read-only by every request.
    Lower priority values are tried first.
    """

    name: str
    priority: int
    client: ProviderClient = field(compare=False)


@dataclass(frozen=True)
class AttemptRecord:
    provider_name: str
    failure: ProviderFailure


@dataclass(frozen=True)
class SolveOutcome:
    status: SolveStatus
    text: Optional[str] = None
    provider_name: Optional[str] = None
    attempts: Tuple[AttemptRecord, ...] = ()   # failed attempts, in chain order

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    @classmethod
    def solved_by(
        cls,
        provider_name: str,
        text: str,
        attempts: Tuple[AttemptRecord, ...] = (),
    ) -> "SolveOutcome":
        return cls(status="solved", text=text, provider_name=provider_name, attempts=attempts)

    @classmethod
    def all_failed(cls, attempts: Tuple[AttemptRecord, ...]) -> "SolveOutcome":
        return cls(status="all_failed", attempts=attempts)

    def describe_attempts(self) -> str:
        """One-line summary for logs, e.g. 'gemini=non_ok_status(429), wolfram=not_configured'."""
        if not self.attempts:
            return "no providers"
        return ", ".join(f"{a.provider_name}={a.failure}" for a in self.attempts)
