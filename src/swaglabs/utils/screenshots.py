"""Ad-hoc screenshot capture for debugging scenarios."""

from __future__ import annotations

import re
from pathlib import Path

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from swaglabs.utils.helpers import get_timestamp

logger = structlog.get_logger()


def take_timestamped_screenshot(page: Page, name: str, directory: Path | str) -> Path:
    """Save a full-page screenshot as `<name>-<timestamp>.png` and return its path."""
    timestamp = re.sub(r"[:.+]", "-", get_timestamp())
    path = Path(directory) / f"{name}-{timestamp}.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    page.screenshot(path=str(path), full_page=True)
    logger.info("screenshot_saved", path=str(path))
    return path


def capture_failure_screenshot(page: Page, name: str, directory: Path | str) -> Path | None:
    """Like take_timestamped_screenshot, but None when the page cannot be captured.

    Used while another error is already being raised, which must stay the
    one reported.
    """
    try:
        return take_timestamped_screenshot(page, name, directory)
    except PlaywrightError as e:
        logger.warning("screenshot_failed", name=name, error=str(e))
        return None
