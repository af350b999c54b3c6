"""Session preparation used by the authenticated fixtures.

The browser session itself is owned by pytest-playwright's `page` fixture
(one isolated context per test, closed on every exit path). This module only
configures it and advances it to a logged-in state.
"""

from __future__ import annotations

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect

from swaglabs.config.settings import Settings
from swaglabs.core.exceptions import SetupError
from swaglabs.data.models import Credential
from swaglabs.pages.inventory_page import InventoryPage
from swaglabs.pages.login_page import LoginPage

logger = structlog.get_logger()


def apply_timeouts(page: Page, settings: Settings) -> None:
    """Bound every operation on the session by the configured budgets."""
    page.set_default_timeout(settings.action_timeout_ms)
    page.set_default_navigation_timeout(settings.navigation_timeout_ms)
    expect.set_options(timeout=settings.expect_timeout_ms)


def authenticate(page: Page, credential: Credential, timeout_ms: int = 10_000) -> Page:
    """Log in and block until the inventory screen is visible.

    Args:
        page: Session to advance; borrowed, not closed here.
        credential: Must be a valid credential.
        timeout_ms: How long to wait for the inventory screen.

    Returns:
        The same page, now on the inventory screen.

    Raises:
        SetupError: If the credential is not valid, or any step fails or
            times out. The Playwright error is chained as the cause.
    """
    if not credential.expects_success:
        raise SetupError(
            "select_credential",
            f"{credential.username!r} is {credential.kind.value}; cannot pre-authenticate",
        )

    login_page = LoginPage(page)
    inventory_page = InventoryPage(page)
    log = logger.bind(username=credential.username)

    step = "navigate"
    try:
        login_page.goto()
        step = "submit_credentials"
        login_page.login_as(credential)
        step = "await_inventory"
        inventory_page.inventory_container.wait_for(state="visible", timeout=timeout_ms)
    except PlaywrightError as e:
        error = login_page.get_error_message() if step == "await_inventory" else ""
        log.warning("authentication_failed", step=step, error=str(e), page_error=error)
        detail = f"{type(e).__name__}: {e}"
        if error:
            detail = f"{detail} (login error shown: {error})"
        raise SetupError(step, detail) from e

    log.debug("authenticated", url=page.url)
    return page
