from __future__ import annotations

from pydantic import BaseModel


class ErrorSchema(BaseModel):
    error: str
    message: str | None = None


class HealthSchema(BaseModel):
    status: str
