"""
GitHub Release step: GitHub API authentication helpers.

Both the releases API and the uploads API receive the token as the
access_token query parameter on every request.
"""

from dataclasses import dataclass

import httpx

from github_release.utils.logging import mask_secret


@dataclass(frozen=True)
class GitHubCredentials:
    auth_token: str

    def as_params(self) -> dict[str, str]:
        """Return the auth query parameters required by the GitHub API."""
        return {"access_token": self.auth_token}

    def redact(self, url: httpx.URL | str) -> str:
        """Mask the access_token query parameter so the URL can be logged."""
        url = httpx.URL(url)
        if "access_token" not in url.params:
            return str(url)
        return str(url.copy_set_param("access_token", mask_secret(self.auth_token)))
