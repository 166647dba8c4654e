from typing import Iterable, List, Optional

from .base import ProviderClient
from .types import FailureReason, ProviderResult


class StubProviderClient(ProviderClient):
    """
    Deterministic fake provider for testing and local runs.

    Replays a fixed script of results: call i returns script[i], and the
    last entry repeats once the script is exhausted. Every call is
    recorded so tests can assert which questions reached the provider.
    """

    def __init__(self, name: str = "stub", script: Optional[Iterable[ProviderResult]] = None):
        self.name = name
        self._script: List[ProviderResult] = list(script or [])
        self.calls: List[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def attempt(self, question: str) -> ProviderResult:
        self.calls.append(question)

        if not self._script:
            return ProviderResult.success(f"Stub answer for: {question}")

        index = min(len(self.calls) - 1, len(self._script) - 1)
        return self._script[index]

    @classmethod
    def answering(cls, name: str, text: str) -> "StubProviderClient":
        return cls(name=name, script=[ProviderResult.success(text)])

    @classmethod
    def failing(
        cls,
        name: str,
        reason: FailureReason = FailureReason.TRANSPORT_ERROR,
        status_code: Optional[int] = None,
    ) -> "StubProviderClient":
        return cls(name=name, script=[ProviderResult.fail(reason, status_code=status_code)])
