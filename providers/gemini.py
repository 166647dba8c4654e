"""
Google Gemini profile (generative-text provider).

Request:
    POST {base}/models/{model}:generateContent
    x-goog-api-key: <key>
    {"contents": [{"role": "user", "parts": [{"text": "<prompt>"}]}]}

Response:
    {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
    Quota and key errors may arrive with an "error" object in the body.

The key travels in a header, never in the query string, so request URLs
are safe to appear in client logs.
"""

from typing import Any, Optional

from .http import ProviderProfile
from .prompts import step_by_step_prompt
from .types import ProviderKind, ProviderRequest

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"


def _extract_error(data: Any) -> Optional[str]:
    if not isinstance(data, dict) or data.get("error") is None:
        return None
    err = data["error"]
    if isinstance(err, dict):
        return str(err.get("message") or err.get("status") or err)
    return str(err)


def _extract_text(data: Any, question: str) -> Optional[str]:
    text = data["candidates"][0]["content"]["parts"][0]["text"]
    if not isinstance(text, str):
        return None
    return text


def gemini_profile(model: str = DEFAULT_GEMINI_MODEL, base_url: str = GEMINI_BASE_URL) -> ProviderProfile:
    def build_request(question: str, api_key: str) -> ProviderRequest:
        return ProviderRequest(
            method="POST",
            url=f"{base_url}/models/{model}:generateContent",
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": api_key,
            },
            json={
                "contents": [
                    {
                        "role": "user",
                        "parts": [{"text": step_by_step_prompt(question)}],
                    }
                ]
            },
        )

    return ProviderProfile(
        name="gemini",
        kind=ProviderKind.GENERATIVE,
        build_request=build_request,
        extract_text=_extract_text,
        extract_error=_extract_error,
    )
