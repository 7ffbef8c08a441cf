"""
GitHub Release step: structured error catalog.

Every error has a code, human message, and suggested fix. Fatal errors end
the run with a non-zero exit code; the rest are logged and swallowed by the
orchestrator.
"""

from __future__ import annotations

from typing import Any


class ReleaseStepError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class MalformedRepositoryURLError(ReleaseStepError):
    def __init__(self, url: str):
        super().__init__(
            code="MALFORMED_REPOSITORY_URL",
            message=f"Owner and repository could not be obtained from URL: {url!r}",
            suggestion="Use git@host:owner/repo.git or https://host/owner/repo(.git).",
        )


class ReleaseCreationFailedError(ReleaseStepError):
    def __init__(self, reason: str, body: str = ""):
        super().__init__(
            code="RELEASE_CREATION_FAILED",
            message=f"GitHub API could not create release: {reason}",
            suggestion="Check the auth token scopes, the release tag and that the tag does not already have a release.",
            detail=body[:500] if body else None,
        )


class AssetUploadFailedError(ReleaseStepError):
    def __init__(self, name: str, reason: str, body: str = ""):
        super().__init__(
            code="ASSET_UPLOAD_FAILED",
            message=f"Upload of asset {name} failed: {reason}",
            suggestion="Check that no asset with the same name exists on the release.",
            detail=body[:500] if body else None,
        )


class InvalidAssetError(ReleaseStepError):
    def __init__(self, path: str, reason: str = "asset can't be a directory"):
        super().__init__(
            code="INVALID_ASSET",
            message=f"Invalid asset {path}: {reason}",
            suggestion="Point upload_asset_file at a single regular file (zip directories first).",
        )


class FileReadError(ReleaseStepError):
    def __init__(self, path: str, reason: str):
        super().__init__(
            code="FILE_READ_ERROR",
            message=f"Changelog file could not be read: {path} ({reason})",
            suggestion="Check the paths in changelog_file_list. Entries are separated by '|'.",
        )


class ExportFailedError(ReleaseStepError):
    def __init__(self, key: str, reason: str, output: str = ""):
        super().__init__(
            code="EXPORT_FAILED",
            message=f"Failed to expose {key} with envman: {reason}",
            suggestion="Make sure the step runs inside a bitrise build with envman available.",
            detail=output[:500] if output else None,
        )
