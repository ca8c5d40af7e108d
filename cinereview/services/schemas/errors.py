from __future__ import annotations

from pydantic import BaseModel


class ErrorRead(BaseModel):
    error: str
    detail: str
