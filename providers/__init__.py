"""
Provider boundary layer for math solving.

Each backing service is reached through one ProviderClient capability so
the fallback chain stays agnostic of the service behind it.

Supported providers (default priority order):
- gemini:      Google Gemini generateContent (generative text)
- wolfram:     WolframAlpha Short Answers (computational knowledge)
- huggingface: Hugging Face Inference API (hosted instruct model)
- StubProviderClient: deterministic fake (tests, PROVIDER_MODE=stub)

Example usage:
    from providers import HTTPProviderClient, gemini_profile

    client = HTTPProviderClient(gemini_profile(), api_key="...")
    result = await client.attempt("What is 6 * 7?")
"""

from .types import (
    FailureReason,
    ProviderFailure,
    ProviderKind,
    ProviderRequest,
    ProviderResult,
    ProviderStatus,
)
from .base import ProviderClient
from .http import HTTPProviderClient, ProviderProfile
from .gemini import gemini_profile
from .wolfram import wolfram_profile
from .huggingface import huggingface_profile
from .stub import StubProviderClient

__all__ = [
    "FailureReason",
    "ProviderFailure",
    "ProviderKind",
    "ProviderRequest",
    "ProviderResult",
    "ProviderStatus",
    "ProviderClient",
    "HTTPProviderClient",
    "ProviderProfile",
    "gemini_profile",
    "wolfram_profile",
    "huggingface_profile",
    "StubProviderClient",
]
