"""
schemas/errors.py — Structured error response model

Shared by the controller route adapter and the HTTPException / unhandled
exception handlers in main.py, so every error leaves the API in one shape.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    status_code: int
    request_id: str = ""
