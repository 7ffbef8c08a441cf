"""GitHub Release step data models."""

from github_release.models.release import ReleaseRecord
from github_release.models.run import (
    RunState,
    StepTiming,
    RunResult,
)

__all__ = [
    "ReleaseRecord",
    "RunState",
    "StepTiming",
    "RunResult",
]
