"""
Infrastructure configuration system.

Environment-based provider setup with sensible defaults.
A missing credential is never a startup error: the provider stays in the
chain and reports NotConfigured when asked.
"""

import logging
import os
from typing import Optional, Literal, Tuple
from dataclasses import dataclass

import httpx

from providers import (
    HTTPProviderClient,
    StubProviderClient,
    gemini_profile,
    huggingface_profile,
    wolfram_profile,
)
from providers.gemini import DEFAULT_GEMINI_MODEL
from providers.huggingface import DEFAULT_HF_MODEL
from solver import ProviderSpec


logger = logging.getLogger(__name__)

ProviderModeType = Literal["live", "stub"]
_PROVIDER_MODES: Tuple[str, ...] = ("live", "stub")

# Fixed fallback order: fast generative answer first, then Wolfram's exact
# computation, then the hosted open model.
PROVIDER_ORDER: Tuple[str, ...] = ("gemini", "wolfram", "huggingface")


@dataclass(frozen=True)
class InfraConfig:
    """Provider configuration from environment."""

    provider_mode: ProviderModeType

    # Gemini
    gemini_api_key: Optional[str]
    gemini_model: str

    # WolframAlpha
    wolfram_api_key: Optional[str]

    # Hugging Face
    hf_api_key: Optional[str]
    hf_model: str

    # Per-provider transport timeout (no budget spans the whole chain)
    provider_timeout_s: float

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """Load configuration from environment variables."""
        return cls(
            provider_mode=_provider_mode_from_env(),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            wolfram_api_key=os.getenv("WOLFRAM_API_KEY") or None,
            hf_api_key=os.getenv("HF_API_KEY") or None,
            hf_model=os.getenv("HF_MODEL", DEFAULT_HF_MODEL),
            provider_timeout_s=float(os.getenv("PROVIDER_TIMEOUT_S", "30")),
        )

    def credentials_status(self) -> dict:
        """Which providers have a credential set. Never includes the secrets."""
        if self.provider_mode == "stub":
            return {"stub": True}
        return {
            "gemini": bool(self.gemini_api_key),
            "wolfram": bool(self.wolfram_api_key),
            "huggingface": bool(self.hf_api_key),
        }

    def create_provider_specs(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> Tuple[ProviderSpec, ...]:
        """
        Create the ordered fallback chain based on configuration.

        Args:
            transport: Optional httpx transport shared by all HTTP clients
                       (tests inject a MockTransport here).
        """
        if self.provider_mode == "stub":
            return (ProviderSpec(name="stub", priority=0, client=StubProviderClient()),)

        clients = {
            "gemini": HTTPProviderClient(
                gemini_profile(model=self.gemini_model),
                api_key=self.gemini_api_key,
                timeout=self.provider_timeout_s,
                transport=transport,
            ),
            "wolfram": HTTPProviderClient(
                wolfram_profile(),
                api_key=self.wolfram_api_key,
                timeout=self.provider_timeout_s,
                transport=transport,
            ),
            "huggingface": HTTPProviderClient(
                huggingface_profile(model=self.hf_model),
                api_key=self.hf_api_key,
                timeout=self.provider_timeout_s,
                transport=transport,
            ),
        }
        return tuple(
            ProviderSpec(name=name, priority=index, client=clients[name])
            for index, name in enumerate(PROVIDER_ORDER)
        )


def _provider_mode_from_env() -> ProviderModeType:
    """Read PROVIDER_MODE case-insensitively; unknown values fall back to live."""
    mode = os.getenv("PROVIDER_MODE", "live").strip().lower()
    if mode not in _PROVIDER_MODES:
        logger.warning(f"Unknown PROVIDER_MODE {mode!r}, using \"live\"")
        return "live"
    return mode  # type: ignore


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the current environment."""
    return InfraConfig.from_env()
