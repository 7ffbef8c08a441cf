"""
GitHub Release step: logger with duration tracking.
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-7s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("github_release")

# httpx logs full request URLs, which carry the access_token query parameter.
logging.getLogger("httpx").setLevel(logging.WARNING)


def mask_secret(value: str) -> str:
    """Hide a secret for logging; empty values stay visible as empty."""
    return "***" if value else ""


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Context manager that logs the start and duration of a step."""
    logger.info("▶ %s — started", step_name)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("✔ %s — completed in %.0f ms", step_name, elapsed_ms)
