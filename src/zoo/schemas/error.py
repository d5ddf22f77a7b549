"""Error response schemas.

Every error uses the envelope {"error": {"code": "...", "message": "..."}},
built by the exception handlers in main.py.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable code plus the domain exception message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
