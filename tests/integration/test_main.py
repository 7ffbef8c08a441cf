"""Integration tests for the process entry point and its exit codes."""

import httpx
import pytest

from github_release import main as main_module
from github_release.pipeline.orchestrator import StepOrchestrator

STEP_INPUTS = {
    "github_auth_token": "tok123",
    "repository_url": "git@github.com:bitrise-io/steps-github-release.git",
    "changelog_file_list": "",
    "release_tag": "1.0.0",
    "release_name": "First release",
    "target_commitish": "master",
    "is_draft": "false",
    "is_prerelease": "false",
    "upload_asset_file": "",
}


@pytest.fixture
def step_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key, value in STEP_INPUTS.items():
        monkeypatch.setenv(key, value)
    for key in ("github_api_base_url", "github_upload_base_url", "github_http_timeout"):
        monkeypatch.setenv(key, "")
    return monkeypatch


def wire(monkeypatch, handler, exported):
    """Make main() build orchestrators that talk to a mock API."""

    def factory(config):
        return StepOrchestrator(
            config,
            transport=httpx.MockTransport(handler),
            exporter=exported.append,
        )

    monkeypatch.setattr(main_module, "StepOrchestrator", factory)


def created(request):
    if request.url.host == "uploads.github.com":
        return httpx.Response(500, text="upload broken")
    return httpx.Response(201, json={"id": 42, "html_url": "http://x/42"})


class TestMain:
    def test_success_exits_zero(self, step_env):
        exported: list[str] = []
        wire(step_env, created, exported)
        assert main_module.main() == 0
        assert exported == ["http://x/42"]

    def test_asset_failure_exits_zero(self, step_env, tmp_path):
        asset = tmp_path / "app.zip"
        asset.write_bytes(b"PK")
        step_env.setenv("upload_asset_file", str(asset))
        exported: list[str] = []
        wire(step_env, created, exported)

        assert main_module.main() == 0
        assert exported == ["http://x/42"]

    def test_malformed_url_exits_non_zero(self, step_env):
        step_env.setenv("repository_url", "")
        exported: list[str] = []
        wire(step_env, created, exported)
        assert main_module.main() == 1
        assert exported == []

    def test_create_failure_exits_non_zero(self, step_env):
        exported: list[str] = []
        wire(step_env, lambda request: httpx.Response(422, json={}), exported)
        assert main_module.main() == 1
        assert exported == []

    def test_export_failure_exits_non_zero(self, step_env):
        def factory(config):
            def broken_export(url):
                from github_release.errors import ExportFailedError
                raise ExportFailedError("RELEASE_URL", "exit status 1")

            return StepOrchestrator(
                config,
                transport=httpx.MockTransport(created),
                exporter=broken_export,
            )

        step_env.setattr(main_module, "StepOrchestrator", factory)
        assert main_module.main() == 1

    def test_unexpected_error_exits_non_zero(self, step_env):
        def factory(config):
            raise RuntimeError("boom")

        step_env.setattr(main_module, "StepOrchestrator", factory)
        assert main_module.main() == 1

    def test_token_not_logged(self, step_env, caplog):
        exported: list[str] = []
        wire(step_env, created, exported)
        with caplog.at_level("INFO", logger="github_release"):
            main_module.main()
        assert "tok123" not in caplog.text
