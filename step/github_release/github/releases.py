"""
GitHub Release step: create-release client.

  POST {api}/repos/{owner}/{repo}/releases?access_token={token}

Expects 201 Created with the new release as JSON. No retries: transport
errors surface immediately with the underlying cause.
"""

import json

import httpx

from github_release.errors import ReleaseCreationFailedError
from github_release.github.auth import GitHubCredentials
from github_release.github.repository import RepositoryIdentity
from github_release.models.release import ReleaseRecord
from github_release.utils.logging import logger, step_timer


class ReleasePublisher:
    """Thin sync wrapper around the GitHub create-release endpoint."""

    def __init__(
        self,
        credentials: GitHubCredentials,
        identity: RepositoryIdentity,
        api_base_url: str = "https://api.github.com",
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.credentials = credentials
        self.identity = identity
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def releases_url(self) -> str:
        return f"{self.api_base_url}/repos/{self.identity.owner}/{self.identity.repo}/releases"

    def create_release(self, release: ReleaseRecord) -> ReleaseRecord:
        """
        Create the release and enrich ``release`` in place with the response.

        Returns the same object, now carrying id, upload_url and html_url.
        Raises ReleaseCreationFailedError on any non-201 answer or transport
        failure.
        """
        payload = release.to_payload()
        url = httpx.URL(self.releases_url, params=self.credentials.as_params())

        with step_timer("Create release"):
            logger.info("  Payload: %s", json.dumps(payload))
            logger.info("  Posting release to: %s", self.credentials.redact(url))
            try:
                with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                    resp = client.post(url, json=payload)
            except httpx.HTTPError as exc:
                logger.error("  Create release request failed: %s", exc)
                raise ReleaseCreationFailedError(f"{type(exc).__name__}: {exc}") from exc

            if resp.status_code != 201:
                logger.error(
                    "  Create release returned %d: %s", resp.status_code, resp.text,
                )
                raise ReleaseCreationFailedError(
                    f"{resp.status_code} {resp.reason_phrase}", resp.text,
                )

            try:
                data = resp.json()
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                release.apply_response(data)
            except ValueError as exc:
                raise ReleaseCreationFailedError(f"undecodable response: {exc}", resp.text) from exc

            logger.info("  Created release %s → %s", release.id, release.html_url)
            return release
