"""
Solve API - Pydantic Schemas

Wire contract for POST /api/solve.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SolveRequest(BaseModel):
    """Inbound payload. Validation of the question happens in the handler."""

    question: Optional[str] = Field(None, description="Natural-language math question")


class SolveResult(BaseModel):
    result: str = Field(..., description="Formatted solution text")
    provider: str = Field(..., description="Name of the provider that answered")


class ErrorResponse(BaseModel):
    error: str
