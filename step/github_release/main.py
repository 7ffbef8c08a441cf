"""
GitHub Release step: process entry point.

Exit codes:
  0  release published and RELEASE_URL exported
  1  malformed repository URL, release creation failure, export failure,
     or any unexpected error

An asset upload failure is logged and does not change the exit code.
"""

from __future__ import annotations

import os
import sys

from github_release.core.config import load_config, load_env_file
from github_release.errors import ReleaseStepError
from github_release.pipeline.orchestrator import StepOrchestrator
from github_release.utils.logging import logger


def main() -> int:
    load_env_file()
    config = load_config(os.environ)

    logger.info("Configs:")
    for key, value in config.summary().items():
        logger.info("- %s: %s", key, value)

    try:
        result = StepOrchestrator(config).run()
    except ReleaseStepError as exc:
        logger.error("%s: %s", exc.code, exc.message)
        if exc.suggestion:
            logger.error("  Suggestion: %s", exc.suggestion)
        if exc.detail:
            logger.error("  Detail: %s", exc.detail)
        return 1
    except Exception:
        logger.exception("GitHub release step failed")
        return 1

    for warning in result.warnings:
        logger.warning("  %s", warning)
    return 0


if __name__ == "__main__":
    sys.exit(main())
