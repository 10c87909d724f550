from __future__ import annotations

from typing import List, Literal
from pydantic import BaseModel, Field


class Issue(BaseModel):
    code: Literal[
        "DAY_COUNT_MISMATCH",
        "DAY_NUMBERING",
        "NO_ACTIVE_DAYS",
        "EMPTY_ACTIVE_DAY",
        "DUPLICATE_EXERCISE",
        "UNKNOWN_EXERCISE",
    ]
    message: str


class ValidationReport(BaseModel):
    ok: bool
    issues: List[Issue] = Field(default_factory=list)
