"""
GitHub Release step: run result contracts.

Every run returns a RunResult with the published release, per-step timings
and the non-fatal problems that were swallowed along the way.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class RunState(str, enum.Enum):
    RECEIVED = "RECEIVED"
    RESOLVED = "RESOLVED"
    NOTES_COLLECTED = "NOTES_COLLECTED"
    PUBLISHED = "PUBLISHED"
    ASSET_UPLOADED = "ASSET_UPLOADED"
    EXPORTED = "EXPORTED"
    FAILED = "FAILED"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | skipped | failed
    detail: str = ""


class RunResult(BaseModel):
    """Complete output contract for one step run."""

    run_id: str
    repository: str
    release_id: int | None = None
    release_url: str = ""
    asset_uploaded: bool = False
    timings: list[StepTiming] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
