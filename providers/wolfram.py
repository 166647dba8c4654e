"""
WolframAlpha Short Answers profile (computational-knowledge provider).

GET /v1/result?appid=...&i=<question> answers with a plain-text body.
Status 501 means Wolfram could not interpret or answer the question.
"""

from typing import Any, Optional

from .http import ProviderProfile
from .types import ProviderKind, ProviderRequest

WOLFRAM_RESULT_URL = "http://api.wolframalpha.com/v1/result"
WOLFRAM_LABEL = "### WolframAlpha Solution"


def _extract_text(body: Any, question: str) -> Optional[str]:
    text = (body or "").strip()
    if not text:
        return None
    return f"{WOLFRAM_LABEL}\n{text}"


def wolfram_profile(url: str = WOLFRAM_RESULT_URL) -> ProviderProfile:
    def build_request(question: str, api_key: str) -> ProviderRequest:
        # The raw question goes out unprompted; Wolfram parses it itself
        return ProviderRequest(
            method="GET",
            url=url,
            params={"appid": api_key, "i": question},
        )

    return ProviderProfile(
        name="wolfram",
        kind=ProviderKind.COMPUTE,
        build_request=build_request,
        extract_text=_extract_text,
        body_format="text",
    )
