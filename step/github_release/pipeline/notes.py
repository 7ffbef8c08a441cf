"""
GitHub Release step: release notes collection.

Concatenates the changelog fragments listed in changelog_file_list into one
release body. A fragment that cannot be read is logged and skipped; this
step never fails the run.
"""

from __future__ import annotations

from pathlib import Path

from github_release.errors import FileReadError
from github_release.utils.logging import logger, step_timer

LIST_DELIMITER = "|"
FRAGMENT_SEPARATOR = "\n\n"


def split_file_list(file_list: str) -> list[str]:
    """Split a pipe-delimited list into trimmed paths, dropping blank entries."""
    entries = (item.strip() for item in file_list.split(LIST_DELIMITER))
    return [item for item in entries if item]


def collect_release_notes(file_list: str, warnings: list[str] | None = None) -> str:
    """
    Read every listed file in order and join them with one blank line.

    Unreadable files add no separator. Messages for skipped files are
    appended to ``warnings`` when a list is given.
    """
    paths = split_file_list(file_list)
    if not paths:
        return ""

    with step_timer("Collect release notes"):
        parts: list[str] = []
        for item in paths:
            try:
                content = Path(item).read_bytes().decode("utf-8", errors="replace")
            except OSError as exc:
                err = FileReadError(item, exc.strerror or str(exc))
                logger.error("  %s", err.message)
                if warnings is not None:
                    warnings.append(err.message)
                continue
            parts.append(content)
            logger.info("  Read %s (%d chars)", item, len(content))

        return FRAGMENT_SEPARATOR.join(parts)
