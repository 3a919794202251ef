"""Error log documents stored in the ``errors`` collection."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorLog(BaseModel):
    stack: str
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
