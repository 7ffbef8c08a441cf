"""Shared test configuration and fixtures for the GitHub Release step test suite."""

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Add step/ to Python path so imports work without installing
step_dir = str(Path(__file__).parent.parent / "step")
if step_dir not in sys.path:
    sys.path.insert(0, step_dir)

from github_release.core.config import Configuration  # noqa: E402


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it answered."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def recording_transport():
    return RecordingTransport


@pytest.fixture
def make_config():
    def _make(**overrides) -> Configuration:
        values = dict(
            auth_token="tok123",
            repository_url="https://github.com/bitrise-io/steps-github-release.git",
            changelog_file_list="",
            release_tag="1.0.0",
            release_name="First release",
            target_commitish="master",
            is_draft=False,
            is_prerelease=False,
            upload_asset_file="",
        )
        values.update(overrides)
        return Configuration(**values)

    return _make
