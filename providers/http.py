"""
Generic HTTP provider client.

Every backing service is reached through the same control flow:

  1. credential check (no network call when missing)
  2. one HTTP request built by the provider profile
  3. ok-status check
  4. body parse + in-body error check
  5. text extraction

Providers differ only in their ProviderProfile: endpoint and request shape,
which statuses count as ok, how text is pulled out of the body, and how an
in-body error is detected.

Guarantees:
- Never raises: all failures return ProviderResult(status="failure")
- Credentials never logged (URLs carrying keys are not logged either)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Literal, Optional

import httpx

from .base import ProviderClient
from .types import FailureReason, ProviderKind, ProviderRequest, ProviderResult

logger = logging.getLogger(__name__)

BodyFormat = Literal["json", "text"]

# Diagnostic body snippets are cut to this many characters in logs
_LOG_BODY_CHARS = 300


def _no_error(data: Any) -> Optional[str]:
    return None


@dataclass(frozen=True)
class ProviderProfile:
    """Per-provider configuration run by HTTPProviderClient."""

    name: str
    kind: ProviderKind
    build_request: Callable[[str, str], ProviderRequest]     # (question, api_key)
    extract_text: Callable[[Any, str], Optional[str]]        # (parsed body, question)
    extract_error: Callable[[Any], Optional[str]] = _no_error
    ok_statuses: FrozenSet[int] = field(default_factory=lambda: frozenset({200}))
    body_format: BodyFormat = "json"


class HTTPProviderClient(ProviderClient):
    """
    ProviderClient that runs a ProviderProfile over httpx.

    Usage:
        client = HTTPProviderClient(gemini_profile(), api_key="...")
        result = await client.attempt("integrate x^2")
    """

    def __init__(
        self,
        profile: ProviderProfile,
        api_key: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            profile:   Provider-specific request/response rules.
            api_key:   Credential; blank or None means NotConfigured.
            timeout:   Transport timeout for this provider's single call.
            transport: Optional httpx transport (tests inject a MockTransport).
        """
        self.profile = profile
        self.name = profile.name
        self._api_key = (api_key or "").strip()
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def attempt(self, question: str) -> ProviderResult:
        logger.info(f"-> Trying {self.name}...")

        if not self.configured:
            logger.warning(f"{self.name}: credential not set, skipping")
            return ProviderResult.fail(FailureReason.NOT_CONFIGURED)

        try:
            request = self.profile.build_request(question, self._api_key)
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    params=request.params or None,
                    headers=request.headers or None,
                    json=request.json,
                )

        except httpx.TimeoutException as e:
            logger.error(f"{self.name}: timed out after {self.timeout}s ({type(e).__name__})")
            return ProviderResult.fail(FailureReason.TRANSPORT_ERROR, detail="timeout")

        except httpx.HTTPError as e:
            logger.error(f"Error connecting to {self.name}: {type(e).__name__}")
            return ProviderResult.fail(FailureReason.TRANSPORT_ERROR, detail=type(e).__name__)

        except Exception as e:
            logger.error(
                f"{self.name}: unexpected error issuing request: {type(e).__name__}",
                exc_info=True,
            )
            return ProviderResult.fail(FailureReason.TRANSPORT_ERROR, detail=type(e).__name__)

        return self._interpret(response, question)

    def _interpret(self, response: httpx.Response, question: str) -> ProviderResult:
        """Map an HTTP response to a ProviderResult."""
        status_code = response.status_code
        if status_code not in self.profile.ok_statuses:
            logger.error(
                f"{self.name} failed with status: {status_code} "
                f"{response.text[:_LOG_BODY_CHARS]!r}"
            )
            return ProviderResult.fail(FailureReason.NON_OK_STATUS, status_code=status_code)

        if self.profile.body_format == "json":
            try:
                data = response.json()
            except ValueError:
                logger.error(f"{self.name}: ok status but body is not JSON")
                return ProviderResult.fail(FailureReason.MALFORMED_PAYLOAD, detail="invalid_json")

            error = self.profile.extract_error(data)
            if error is not None:
                logger.error(f"{self.name} API error: {error}")
                return ProviderResult.fail(FailureReason.MALFORMED_PAYLOAD, detail=error)
        else:
            data = response.text

        try:
            text = self.profile.extract_text(data, question)
        except (KeyError, IndexError, TypeError, AttributeError):
            text = None

        if not isinstance(text, str) or not text.strip():
            logger.error(f"No valid response from {self.name}")
            return ProviderResult.fail(FailureReason.EMPTY_RESPONSE)

        logger.info(f"{self.name} success.")
        return ProviderResult.success(text)

    def __repr__(self) -> str:
        return (
            f"HTTPProviderClient(name={self.name}, kind={self.profile.kind.value}, "
            f"configured={self.configured})"
        )
