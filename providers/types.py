from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Literal

ProviderStatus = Literal["success", "failure"]


class FailureReason(str, Enum):
    """Why a single provider attempt produced no usable answer."""

    NOT_CONFIGURED = "not_configured"
    TRANSPORT_ERROR = "transport_error"
    NON_OK_STATUS = "non_ok_status"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_PAYLOAD = "malformed_payload"


class ProviderKind(str, Enum):
    GENERATIVE = "generative"
    COMPUTE = "compute"
    INFERENCE = "inference"


@dataclass(frozen=True)
class ProviderFailure:
    reason: FailureReason
    status_code: Optional[int] = None   # set for NON_OK_STATUS only
    detail: Optional[str] = None        # diagnostics, never shown to users

    def __str__(self) -> str:
        if self.reason is FailureReason.NON_OK_STATUS:
            return f"{self.reason.value}({self.status_code})"
        return self.reason.value


@dataclass(frozen=True)
class ProviderResult:
    status: ProviderStatus
    output: Optional[str] = None
    failure: Optional[ProviderFailure] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, output: str) -> "ProviderResult":
        return cls(status="success", output=output)

    @classmethod
    def fail(
        cls,
        reason: FailureReason,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> "ProviderResult":
        return cls(
            status="failure",
            failure=ProviderFailure(reason=reason, status_code=status_code, detail=detail),
        )


@dataclass(frozen=True)
class ProviderRequest:
    """A single outbound HTTP call, as built by a provider profile."""

    method: str
    url: str
    params: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None
