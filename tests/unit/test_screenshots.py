"""Tests for ad-hoc screenshot capture."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from swaglabs.core.exceptions import SetupError
from swaglabs.utils.screenshots import capture_failure_screenshot, take_timestamped_screenshot

pytestmark = pytest.mark.unit


def test_saves_full_page_under_timestamped_name(tmp_path: Path) -> None:
    """
    Given: A page and a target directory that does not exist yet
    When: Taking a timestamped screenshot
    Then: The directory is created and the path is returned
    """
    page = MagicMock(spec=Page)
    target = tmp_path / "shots"

    path = take_timestamped_screenshot(page, "checkout-error", target)

    assert target.is_dir()
    assert path.parent == target
    assert path.name.startswith("checkout-error-")
    assert path.suffix == ".png"
    assert ":" not in path.name
    page.screenshot.assert_called_once_with(path=str(path), full_page=True)


def test_failure_screenshot_returns_path(tmp_path: Path) -> None:
    page = MagicMock(spec=Page)

    path = capture_failure_screenshot(page, "authentication-failed", tmp_path)

    assert path is not None
    assert path.name.startswith("authentication-failed-")


def test_failure_screenshot_keeps_original_error(tmp_path: Path) -> None:
    """
    Given: A setup error is being raised and the page can no longer be captured
    When: The failure screenshot is attempted
    Then: The capture error is swallowed and the setup error propagates unchanged
    """
    page = MagicMock(spec=Page)
    page.screenshot.side_effect = PlaywrightError("Target page has been closed")

    with pytest.raises(SetupError, match="inventory") as excinfo:
        try:
            raise SetupError("await_inventory", "inventory not visible after 10000ms")
        except SetupError:
            assert capture_failure_screenshot(page, "authentication-failed", tmp_path) is None
            raise

    assert excinfo.value.step == "await_inventory"
