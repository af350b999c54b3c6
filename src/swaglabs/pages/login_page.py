"""Login screen, the storefront's entry point."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator

from swaglabs.data.models import Credential
from swaglabs.pages.base_page import BasePage

logger = structlog.get_logger()


class LoginPage(BasePage):
    """Username/password form plus its error banner."""

    @property
    def username_input(self) -> Locator:
        return self.page.locator("#user-name")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#password")

    @property
    def login_button(self) -> Locator:
        return self.page.locator("#login-button")

    @property
    def error_message(self) -> Locator:
        return self.page.locator('[data-test="error"]')

    def login(self, username: str, password: str) -> None:
        """Fill both fields and submit. Does not check where it lands."""
        self.fill_username(username)
        self.fill_password(password)
        self.click_login()
        logger.debug("login_submitted", username=username)

    def login_as(self, credential: Credential) -> None:
        self.login(credential.username, credential.password)

    def fill_username(self, username: str) -> None:
        self.username_input.fill(username)

    def fill_password(self, password: str) -> None:
        self.password_input.fill(password)

    def click_login(self) -> None:
        self.login_button.click()
        self.page.wait_for_load_state()

    def get_error_message(self) -> str:
        """Error banner text, "" when no error is shown."""
        return self._text(self.error_message)

    def has_error(self) -> bool:
        return self.error_message.is_visible()

    def is_on_login_page(self) -> bool:
        return self.login_button.is_visible()
