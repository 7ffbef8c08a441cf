"""
GitHub Release step: run orchestrator.

Runs the step as a linear state machine:

  RECEIVED → RESOLVED → NOTES_COLLECTED → PUBLISHED
  → ASSET_UPLOADED (optional) → EXPORTED

Identity resolution, release creation and output export are fatal. The
asset upload is best effort: its failure is logged and recorded as a
warning, and the run carries on.
"""

from __future__ import annotations

import time
import uuid
from typing import Callable

import httpx

from github_release.core.config import Configuration
from github_release.errors import ReleaseStepError
from github_release.github.assets import AssetUploader
from github_release.github.auth import GitHubCredentials
from github_release.github.releases import ReleasePublisher
from github_release.github.repository import RepositoryIdentity, resolve_repository_identity
from github_release.models.release import ReleaseRecord
from github_release.models.run import RunResult, RunState, StepTiming
from github_release.pipeline.export import export_release_url
from github_release.pipeline.notes import collect_release_notes
from github_release.utils.logging import logger


def build_release(config: Configuration, release_notes: str) -> ReleaseRecord:
    """Local, not yet identified release record for the configured inputs."""
    return ReleaseRecord(
        tag_name=config.release_tag,
        name=config.release_name,
        target_commitish=config.target_commitish,
        body=release_notes,
        draft=config.is_draft,
        prerelease=config.is_prerelease,
    )


class RunContext:
    """Mutable context passed through the steps. Owns the release record."""

    def __init__(self):
        self.identity: RepositoryIdentity | None = None
        self.release_notes: str = ""
        self.release: ReleaseRecord | None = None
        self.asset_uploaded: bool = False
        self.asset_download_url: str = ""
        self.warnings: list[str] = []


class StepOrchestrator:
    """
    Wires resolver, notes collector, publisher, uploader and exporter.

    Tracks every step's timing and status and produces a RunResult.
    ``transport`` is handed to the HTTP clients; ``exporter`` receives the
    final release URL.
    """

    def __init__(
        self,
        config: Configuration,
        transport: httpx.BaseTransport | None = None,
        exporter: Callable[[str], None] = export_release_url,
    ):
        self.run_id = uuid.uuid4().hex[:12]
        self.config = config
        self.transport = transport
        self.exporter = exporter
        self.credentials = GitHubCredentials(auth_token=config.auth_token)
        self.state = RunState.RECEIVED
        self.ctx = RunContext()
        self.timings: list[StepTiming] = []

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else ("⊘" if status == "skipped" else "✗")
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    def run(self) -> RunResult:
        """Execute every step. Fatal errors propagate as ReleaseStepError."""
        logger.info("=" * 60)
        logger.info("[%s] GitHub release step starting", self.run_id)
        logger.info("=" * 60)
        run_start = time.perf_counter()

        try:
            self._step_resolve()
            self._step_collect_notes()
            self._step_publish()
            self._step_upload_asset()
            self._step_export()
        except Exception:
            self.state = RunState.FAILED
            raise

        total_ms = int((time.perf_counter() - run_start) * 1000)
        logger.info("=" * 60)
        logger.info(
            "[%s] Step complete — release %s, %dms",
            self.run_id, self.ctx.release.html_url, total_ms,
        )
        logger.info("=" * 60)

        return RunResult(
            run_id=self.run_id,
            repository=self.ctx.identity.full_name,
            release_id=self.ctx.release.id,
            release_url=self.ctx.release.html_url,
            asset_uploaded=self.ctx.asset_uploaded,
            timings=self.timings,
            warnings=self.ctx.warnings,
        )

    def _step_resolve(self):
        t = time.perf_counter()
        try:
            self.ctx.identity = resolve_repository_identity(self.config.repository_url)
        except ReleaseStepError as exc:
            self._record_step("resolve", t, "failed", exc.message)
            raise
        self.state = RunState.RESOLVED
        logger.info("  User: %s", self.ctx.identity.owner)
        logger.info("  Repository: %s", self.ctx.identity.repo)
        self._record_step("resolve", t, detail=self.ctx.identity.full_name)

    def _step_collect_notes(self):
        t = time.perf_counter()
        self.ctx.release_notes = collect_release_notes(
            self.config.changelog_file_list, self.ctx.warnings,
        )
        self.state = RunState.NOTES_COLLECTED
        self._record_step("collect_notes", t, detail=f"{len(self.ctx.release_notes)} chars")

    def _step_publish(self):
        t = time.perf_counter()
        self.ctx.release = build_release(self.config, self.ctx.release_notes)
        publisher = ReleasePublisher(
            credentials=self.credentials,
            identity=self.ctx.identity,
            api_base_url=self.config.api_base_url,
            timeout=self.config.http_timeout,
            transport=self.transport,
        )
        try:
            publisher.create_release(self.ctx.release)
        except ReleaseStepError as exc:
            self._record_step("publish", t, "failed", exc.message)
            raise
        self.state = RunState.PUBLISHED
        self._record_step("publish", t, detail=f"id={self.ctx.release.id}")

    def _step_upload_asset(self):
        t = time.perf_counter()
        if not self.config.upload_asset_file:
            self._record_step("upload_asset", t, "skipped", "no asset")
            return

        uploader = AssetUploader(
            credentials=self.credentials,
            identity=self.ctx.identity,
            upload_base_url=self.config.upload_base_url,
            timeout=self.config.http_timeout,
            transport=self.transport,
        )
        try:
            self.ctx.asset_download_url = uploader.upload(
                self.ctx.release, self.config.upload_asset_file,
            )
        except ReleaseStepError as exc:
            logger.error("  %s: %s", exc.code, exc.message)
            self.ctx.warnings.append(exc.message)
            self._record_step("upload_asset", t, "failed", exc.message)
            return
        self.ctx.asset_uploaded = True
        self.state = RunState.ASSET_UPLOADED
        self._record_step("upload_asset", t, detail=self.config.upload_asset_file)

    def _step_export(self):
        t = time.perf_counter()
        try:
            self.exporter(self.ctx.release.html_url)
        except ReleaseStepError as exc:
            self._record_step("export", t, "failed", exc.message)
            raise
        self.state = RunState.EXPORTED
        self._record_step("export", t, detail="RELEASE_URL")
