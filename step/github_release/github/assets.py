"""
GitHub Release step: release asset upload client.

  POST {uploads}/repos/{owner}/{repo}/releases/{id}/assets?access_token={token}&name={file}

The file is streamed as the raw request body with an explicit
Content-Length. Expects 201 Created.
"""

from __future__ import annotations

import mimetypes
import os
import stat
from pathlib import Path
from typing import BinaryIO

import httpx

from github_release.errors import AssetUploadFailedError, InvalidAssetError
from github_release.github.auth import GitHubCredentials
from github_release.github.repository import RepositoryIdentity
from github_release.models.release import ReleaseRecord
from github_release.utils.logging import logger, step_timer

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(filename: str) -> str:
    """Media type for a file name by extension, octet-stream if unknown."""
    media_type, _ = mimetypes.guess_type(filename)
    return media_type or DEFAULT_MEDIA_TYPE


class AssetUploader:
    """Uploads a single file as a binary asset of an existing release."""

    def __init__(
        self,
        credentials: GitHubCredentials,
        identity: RepositoryIdentity,
        upload_base_url: str = "https://uploads.github.com",
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.credentials = credentials
        self.identity = identity
        self.upload_base_url = upload_base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def assets_url(self, release_id: int) -> str:
        return (
            f"{self.upload_base_url}/repos/{self.identity.owner}/{self.identity.repo}"
            f"/releases/{release_id}/assets"
        )

    def upload(self, release: ReleaseRecord, path: str | Path) -> str:
        """Open ``path`` and upload it. Directories are rejected before any request."""
        path = Path(path)
        if path.is_dir():
            raise InvalidAssetError(str(path))
        try:
            fh = path.open("rb")
        except OSError as exc:
            raise AssetUploadFailedError(path.name, f"cannot open file: {exc}") from exc
        return self.upload_file(release, fh)

    def upload_file(self, release: ReleaseRecord, fh: BinaryIO) -> str:
        """
        Stream an open file to the release's assets endpoint.

        The handle is closed on every exit path. Returns the asset's
        browser_download_url when the API reports one.
        """
        try:
            file_path = str(getattr(fh, "name", ""))
            info = os.fstat(fh.fileno())
            if stat.S_ISDIR(info.st_mode):
                raise InvalidAssetError(file_path)
            if release.id is None:
                raise InvalidAssetError(file_path, "release has no id yet")

            name = os.path.basename(file_path)
            media_type = guess_media_type(name)
            url = httpx.URL(
                self.assets_url(release.id),
                params={**self.credentials.as_params(), "name": name},
            )
            headers = {
                "Content-Type": media_type,
                "Content-Length": str(info.st_size),
            }

            with step_timer(f"Upload asset {name}"):
                logger.info(
                    "  Posting asset to %s (%d bytes, %s)",
                    self.credentials.redact(url), info.st_size, media_type,
                )
                try:
                    with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                        resp = client.post(url, content=fh, headers=headers)
                except httpx.HTTPError as exc:
                    raise AssetUploadFailedError(name, f"{type(exc).__name__}: {exc}") from exc

                if resp.status_code != 201:
                    raise AssetUploadFailedError(
                        name, f"{resp.status_code} {resp.reason_phrase}", resp.text,
                    )

                try:
                    download_url = resp.json().get("browser_download_url") or ""
                except (ValueError, AttributeError):
                    download_url = ""
                logger.info("  Uploaded %s %s", name, download_url)
                return download_url
        finally:
            fh.close()
