"""
GitHub Release step: repository identity resolution.

Derives owner/repo from a free-form repository URL. Both SSH
(git@host:owner/repo.git) and HTTP(S) (https://host/owner/repo.git) forms are
recognised; a trailing .git is dropped. The pattern lives only here so a
stricter URL parser can replace it without touching callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from github_release.errors import MalformedRepositoryURLError

# Groups 5 and 6 are owner and repository. Neither may contain a dot.
REPOSITORY_URL_PATTERN = re.compile(
    r"([A-Za-z0-9]+@|http(|s)\:\/\/)([A-Za-z0-9.-]+)(:|\/)([^.]+)\/([^.]+)(\.git)?"
)


@dataclass(frozen=True)
class RepositoryIdentity:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def resolve_repository_identity(url: str) -> RepositoryIdentity:
    """
    Extract owner and repository name from a repository URL.

    Only the first match is used. Raises MalformedRepositoryURLError when the
    URL does not have the expected shape; no partial identity is returned.
    """
    match = REPOSITORY_URL_PATTERN.search(url or "")
    if match is None:
        raise MalformedRepositoryURLError(url)

    owner, repo = match.group(5), match.group(6)
    if not owner or not repo:
        raise MalformedRepositoryURLError(url)
    return RepositoryIdentity(owner=owner, repo=repo)
