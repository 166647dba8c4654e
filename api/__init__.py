"""
Solve API - Module Exports

The FastAPI router lives in api.routes and is included by main.py.
"""

from .handler import (
    ALL_FAILED_MESSAGE,
    NO_QUESTION_MESSAGE,
    SolveRequestHandler,
    SolveResponse,
)
from .schemas import ErrorResponse, SolveRequest, SolveResult

__all__ = [
    "ALL_FAILED_MESSAGE",
    "NO_QUESTION_MESSAGE",
    "SolveRequestHandler",
    "SolveResponse",
    "ErrorResponse",
    "SolveRequest",
    "SolveResult",
]
