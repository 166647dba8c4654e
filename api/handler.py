"""
Solve request handler.

Boundary between the HTTP layer and the fallback chain:

  raw payload → validate question → orchestrator.solve → status + body

Rules:
- Invalid input never reaches the orchestrator
- Users see one generic message on failure; per-provider reasons go to logs
- Never raises
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError

from solver import FallbackOrchestrator

from .schemas import ErrorResponse, SolveRequest, SolveResult

logger = logging.getLogger(__name__)

NO_QUESTION_MESSAGE = "No question provided"
ALL_FAILED_MESSAGE = (
    "Sorry, all of our AI services are busy or could not solve this problem. "
    "Please try again later."
)


@dataclass(frozen=True)
class SolveResponse:
    status_code: int
    body: Dict[str, Any]


class SolveRequestHandler:
    """Validates inbound questions and maps solve outcomes to responses."""

    def __init__(self, orchestrator: FallbackOrchestrator):
        self.orchestrator = orchestrator

    async def handle(self, raw_input: Any) -> SolveResponse:
        question = self._parse_question(raw_input)
        if question is None:
            logger.warning("Rejected solve request without a question")
            return self._error(400, NO_QUESTION_MESSAGE)

        logger.info(f"New question received: {question[:100]!r}")

        try:
            outcome = await self.orchestrator.solve(question)

            if not outcome.solved:
                logger.info(f"Returning generic failure ({outcome.describe_attempts()})")
                return self._error(500, ALL_FAILED_MESSAGE)

            body = SolveResult(result=outcome.text, provider=outcome.provider_name)
            return SolveResponse(status_code=200, body=body.model_dump())

        except Exception as e:
            logger.error(f"Unexpected error while solving: {e}", exc_info=True)
            return self._error(500, ALL_FAILED_MESSAGE)

    @staticmethod
    def _parse_question(raw_input: Any) -> Optional[str]:
        """Return the trimmed question, or None if it is missing or blank."""
        try:
            request = SolveRequest.model_validate(raw_input)
        except ValidationError:
            return None

        question = (request.question or "").strip()
        return question or None

    @staticmethod
    def _error(status_code: int, message: str) -> SolveResponse:
        return SolveResponse(status_code=status_code, body=ErrorResponse(error=message).model_dump())
