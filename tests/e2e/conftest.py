"""Playwright E2E test fixtures for the Swag Labs storefront.

This module provides fixtures for:
- Browser and context setup (viewport, timeouts, base URL)
- Page objects, built lazily and once per test
- A session already logged in with the default user
- HTTP client and visual snapshot comparator

Every test gets its own browser context from pytest-playwright's `page`
fixture; it is closed after the test whether the test passed or failed.

Usage:
    @pytest.mark.e2e
    def test_add_to_cart(authenticated_page, inventory_page):
        inventory_page.add_product_to_cart("Sauce Labs Backpack")
        assert inventory_page.get_cart_item_count() == 1
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
import structlog
from playwright.sync_api import Page

from swaglabs.api.client import JsonPlaceholderClient
from swaglabs.config.settings import Settings, get_settings
from swaglabs.core.exceptions import SetupError
from swaglabs.data.loader import CredentialStore
from swaglabs.data.models import CheckoutInfo
from swaglabs.pages import CartPage, CheckoutPage, InventoryPage, LoginPage, Pages, ProductPage
from swaglabs.session import apply_timeouts, authenticate
from swaglabs.utils.screenshots import capture_failure_screenshot
from swaglabs.visual import SnapshotComparator
from tests.support.factories import CheckoutInfoFactory

logger = structlog.get_logger()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark everything under tests/e2e as e2e and bound it by the scenario timeout."""
    scenario_timeout = get_settings().scenario_timeout_s
    for item in items:
        if "/e2e/" in item.nodeid or item.nodeid.startswith("tests/e2e"):
            item.add_marker(pytest.mark.e2e)
            if item.get_closest_marker("timeout") is None:
                item.add_marker(pytest.mark.timeout(scenario_timeout))


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def base_url(settings: Settings) -> str:
    """Storefront root; page.goto("/") resolves against it."""
    return settings.base_url


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], settings: Settings
) -> dict[str, Any]:
    """Configure browser context for storefront testing."""
    return {
        **browser_context_args,
        "viewport": {"width": settings.viewport_width, "height": settings.viewport_height},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": os.environ.get("HEADED", "0") != "1",
        "slow_mo": int(os.environ.get("SLOW_MO", "0")),
    }


@pytest.fixture
def session_page(page: Page, settings: Settings) -> Generator[Page, None, None]:
    """The test's isolated page with per-operation timeouts applied."""
    apply_timeouts(page, settings)
    yield page


# =============================================================================
# Page Objects
# =============================================================================


@pytest.fixture
def pages(session_page: Page) -> Pages:
    """All page objects for this test, each created on first access."""
    return Pages(session_page)


@pytest.fixture
def login_page(pages: Pages) -> LoginPage:
    return pages.login_page


@pytest.fixture
def inventory_page(pages: Pages) -> InventoryPage:
    return pages.inventory_page


@pytest.fixture
def product_page(pages: Pages) -> ProductPage:
    return pages.product_page


@pytest.fixture
def cart_page(pages: Pages) -> CartPage:
    return pages.cart_page


@pytest.fixture
def checkout_page(pages: Pages) -> CheckoutPage:
    return pages.checkout_page


@pytest.fixture
def login_screen(login_page: LoginPage) -> LoginPage:
    """Login page already opened at the entry point."""
    login_page.goto()
    return login_page


@pytest.fixture
def authenticated_page(
    session_page: Page, credentials: CredentialStore, settings: Settings
) -> Generator[Page, None, None]:
    """Page logged in as the default user and showing the inventory.

    Fails in setup (reported as SETUP-ERROR) when the inventory does not
    appear within `auth_timeout_ms`; the test body never runs in that case.
    """
    credential = credentials.default()
    try:
        authenticate(session_page, credential, timeout_ms=settings.auth_timeout_ms)
    except SetupError as e:
        path = capture_failure_screenshot(
            session_page, "authentication-failed", settings.artifacts_dir
        )
        logger.error(
            "authenticated_page_setup_failed",
            step=e.step,
            screenshot=str(path) if path else None,
        )
        raise
    yield session_page


# =============================================================================
# Data and Collaborators
# =============================================================================


@pytest.fixture
def checkout_info() -> CheckoutInfo:
    """Fresh, complete shipper details."""
    return CheckoutInfoFactory.build()


@pytest.fixture
def api_client(settings: Settings) -> Generator[JsonPlaceholderClient, None, None]:
    """HTTP client for the API suite, closed after the test."""
    with JsonPlaceholderClient(settings.api_base_url, timeout=settings.api_timeout_s) as client:
        yield client


@pytest.fixture(scope="session")
def snapshot_comparator(settings: Settings) -> SnapshotComparator:
    return SnapshotComparator(
        settings.snapshot_dir,
        update=settings.update_snapshots,
        max_diff_pixels=settings.max_diff_pixels,
    )


@pytest.fixture
def snapshot(
    snapshot_comparator: SnapshotComparator, browser_name: str
) -> Generator[Any, None, None]:
    """Compare PNG bytes against a per-browser baseline.

    Usage:
        snapshot(page.screenshot(), "login-page")
    """

    def compare(png: bytes, name: str, max_diff_pixels: int | None = None) -> int:
        return snapshot_comparator.compare(png, f"{name}-{browser_name}", max_diff_pixels)

    yield compare
