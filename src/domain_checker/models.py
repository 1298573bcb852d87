from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Verdict(StrEnum):
    FORBIDDEN = "forbidden"
    ALLOWED = "allowed"


class CheckStats(BaseModel):
    """Statistics for a single checker run."""

    blocklist_size: int = 0
    forbidden_size: int = 0
    queries: int = 0
    forbidden_count: int = 0
    allowed_count: int = 0
