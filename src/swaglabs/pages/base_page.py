"""Behaviour shared by every storefront page object."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator, Page

from swaglabs.data.models import Screen

logger = structlog.get_logger()


class BasePage:
    """Wraps a borrowed Playwright page.

    Locator properties build a fresh Locator on every access; nothing located
    is cached between calls. Actions wait for the UI to settle but never
    assert. Queries return neutral values when their element is absent.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    # -------------------------------------------------------------------------
    # Header (present on every authenticated screen)
    # -------------------------------------------------------------------------

    @property
    def shopping_cart_badge(self) -> Locator:
        return self.page.locator(".shopping_cart_badge")

    @property
    def shopping_cart_link(self) -> Locator:
        return self.page.locator(".shopping_cart_link")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def url(self) -> str:
        return self.page.url

    def goto(self, path: str = "/") -> None:
        """Navigate relative to the context base URL."""
        self.page.goto(path)
        self.page.wait_for_load_state()

    def current_screen(self) -> Screen | None:
        return Screen.from_url(self.page.url)

    def go_to_cart(self) -> None:
        self.shopping_cart_link.click()
        self.page.wait_for_load_state()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_cart_item_count(self) -> int:
        """Number on the cart badge; 0 when the badge is not shown."""
        if not self.shopping_cart_badge.is_visible():
            return 0
        text = self._text(self.shopping_cart_badge).strip()
        return int(text) if text.isdigit() else 0

    @staticmethod
    def _text(locator: Locator) -> str:
        """Text content, or "" when the element is absent."""
        if locator.count() == 0:
            return ""
        return locator.first.text_content() or ""
