"""
GitHub Release step: step output export.

Outputs reach later pipeline steps through the bitrise environment
variable manager:

  bitrise envman add --key RELEASE_URL --value <url>
"""

from __future__ import annotations

import subprocess

from github_release.errors import ExportFailedError
from github_release.utils.logging import logger

RELEASE_URL_KEY = "RELEASE_URL"
ENVMAN_COMMAND = ("bitrise", "envman", "add")


def export_output(key: str, value: str) -> None:
    """Expose ``value`` under ``key``. Raises ExportFailedError on failure."""
    cmd = [*ENVMAN_COMMAND, "--key", key, "--value", value]
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ExportFailedError(key, str(exc)) from exc

    if proc.returncode != 0:
        raise ExportFailedError(key, f"exit status {proc.returncode}", proc.stdout or "")
    logger.info("  Exported %s=%s", key, value)


def export_release_url(url: str) -> None:
    export_output(RELEASE_URL_KEY, url)
