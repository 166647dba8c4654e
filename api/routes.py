"""
Solve API Router

POST /api/solve: question in, formatted solution out.
Pure I/O: validation and fallback live in SolveRequestHandler.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from infra.bootstrap import InfraBootstrap

from .handler import SolveRequestHandler
from .schemas import ErrorResponse, SolveResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["solve"])


def get_request_handler() -> SolveRequestHandler:
    """Get the process-wide handler (tests override this dependency)."""
    return InfraBootstrap.get_instance().get_request_handler()


@router.post(
    "/solve",
    response_model=SolveResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def solve(
    request: Request,
    handler: SolveRequestHandler = Depends(get_request_handler),
) -> JSONResponse:
    """
    Solve a math question.

    Expected payload:
    {
        "question": "What is the derivative of x^2?"
    }

    Returns:
        200 {"result": "...", "provider": "gemini"}
        400 {"error": "No question provided"}
        500 {"error": "<generic message>"} when every provider failed
    """
    payload: Any
    try:
        payload = json.loads(await request.body() or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Solve request body is not valid JSON")
        payload = None

    response = await handler.handle(payload)
    return JSONResponse(status_code=response.status_code, content=response.body)
