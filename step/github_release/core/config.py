"""
GitHub Release step: configuration.

Step inputs arrive as environment variables. An optional .env file in the
working directory is loaded first; values already in the environment win.
The Configuration is built once at startup and passed to every component.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from github_release.utils.logging import mask_secret

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_UPLOAD_BASE_URL = "https://uploads.github.com"
DEFAULT_HTTP_TIMEOUT = 60.0


@dataclass(frozen=True)
class Configuration:
    """Step inputs, immutable for the duration of the run."""
    auth_token: str
    repository_url: str
    changelog_file_list: str
    release_tag: str
    release_name: str
    target_commitish: str
    is_draft: bool
    is_prerelease: bool
    upload_asset_file: str
    api_base_url: str = DEFAULT_API_BASE_URL
    upload_base_url: str = DEFAULT_UPLOAD_BASE_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    def summary(self) -> dict[str, object]:
        """Loggable view of the inputs; the auth token is masked."""
        return {
            "GitHubAuthToken": mask_secret(self.auth_token),
            "RepositoryURL": self.repository_url,
            "ChangelogFileList": self.changelog_file_list,
            "ReleaseTag": self.release_tag,
            "ReleaseName": self.release_name,
            "TargetCommitish": self.target_commitish,
            "IsDraft": self.is_draft,
            "IsPrerelease": self.is_prerelease,
            "UploadAssetFile": self.upload_asset_file,
            "APIBaseURL": self.api_base_url,
            "UploadBaseURL": self.upload_base_url,
            "HTTPTimeout": self.http_timeout,
        }


def load_env_file(path: str | Path | None = None) -> bool:
    """Load a .env file without overriding variables that are already set."""
    if path is None:
        path = Path.cwd() / ".env"
    return load_dotenv(path, override=False)


def load_config(environ: Mapping[str, str] | None = None) -> Configuration:
    env = os.environ if environ is None else environ
    return Configuration(
        auth_token=env.get("github_auth_token", ""),
        repository_url=env.get("repository_url", ""),
        changelog_file_list=env.get("changelog_file_list", ""),
        release_tag=env.get("release_tag", ""),
        release_name=env.get("release_name", ""),
        target_commitish=env.get("target_commitish", ""),
        is_draft=env.get("is_draft", "") == "true",
        is_prerelease=env.get("is_prerelease", "") == "true",
        upload_asset_file=env.get("upload_asset_file", ""),
        api_base_url=(env.get("github_api_base_url") or DEFAULT_API_BASE_URL).rstrip("/"),
        upload_base_url=(env.get("github_upload_base_url") or DEFAULT_UPLOAD_BASE_URL).rstrip("/"),
        http_timeout=float(env.get("github_http_timeout") or DEFAULT_HTTP_TIMEOUT),
    )
