from abc import ABC, abstractmethod
from .types import ProviderResult


class ProviderClient(ABC):
    """
    Abstract provider boundary.
    The orchestrator depends ONLY on this interface.

    Implementations must never raise from attempt(): every failure is
    returned as a typed ProviderResult.
    """

    name: str = "provider"

    @abstractmethod
    async def attempt(self, question: str) -> ProviderResult:
        """Ask the provider to solve one question."""
        raise NotImplementedError
