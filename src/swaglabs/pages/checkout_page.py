"""Checkout flow: information, overview and completion steps."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator

from swaglabs.data.checkout import CheckoutAction, CheckoutStep, next_screen
from swaglabs.data.models import CheckoutInfo
from swaglabs.pages.base_page import BasePage
from swaglabs.utils.helpers import parse_price

logger = structlog.get_logger()

TOTAL_TOLERANCE = 0.01


class CheckoutPage(BasePage):
    """All three checkout steps share one page object.

    Each action checks that it is available from the step currently shown
    (raising CheckoutTransitionError otherwise) and waits until the browser
    has left for the next screen before returning.
    """

    # -------------------------------------------------------------------------
    # Step one: information
    # -------------------------------------------------------------------------

    @property
    def first_name_input(self) -> Locator:
        return self.page.locator('[data-test="firstName"]')

    @property
    def last_name_input(self) -> Locator:
        return self.page.locator('[data-test="lastName"]')

    @property
    def postal_code_input(self) -> Locator:
        return self.page.locator('[data-test="postalCode"]')

    @property
    def continue_button(self) -> Locator:
        return self.page.locator('[data-test="continue"]')

    @property
    def cancel_button(self) -> Locator:
        return self.page.locator('[data-test="cancel"]')

    @property
    def error_message(self) -> Locator:
        return self.page.locator('[data-test="error"]')

    # -------------------------------------------------------------------------
    # Step two: overview
    # -------------------------------------------------------------------------

    @property
    def finish_button(self) -> Locator:
        return self.page.locator('[data-test="finish"]')

    @property
    def subtotal_label(self) -> Locator:
        return self.page.locator(".summary_subtotal_label")

    @property
    def tax_label(self) -> Locator:
        return self.page.locator(".summary_tax_label")

    @property
    def total_label(self) -> Locator:
        return self.page.locator(".summary_total_label")

    @property
    def payment_info(self) -> Locator:
        return self.page.locator('[data-test="payment-info-value"]')

    @property
    def shipping_info(self) -> Locator:
        return self.page.locator('[data-test="shipping-info-value"]')

    # -------------------------------------------------------------------------
    # Complete
    # -------------------------------------------------------------------------

    @property
    def complete_header(self) -> Locator:
        return self.page.locator(".complete-header")

    @property
    def complete_text(self) -> Locator:
        return self.page.locator(".complete-text")

    @property
    def back_home_button(self) -> Locator:
        return self.page.locator('[data-test="back-to-products"]')

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def fill_info(self, info: CheckoutInfo) -> None:
        """Fill all three fields, empty strings included."""
        self.first_name_input.fill(info.first_name)
        self.last_name_input.fill(info.last_name)
        self.postal_code_input.fill(info.postal_code)

    def continue_checkout(self) -> None:
        self._perform(CheckoutAction.CONTINUE, self.continue_button, self._entered_info())

    def submit_info(self, info: CheckoutInfo) -> None:
        self.fill_info(info)
        self._perform(CheckoutAction.CONTINUE, self.continue_button, info)

    def cancel(self) -> None:
        self._perform(CheckoutAction.CANCEL, self.cancel_button)

    def finish(self) -> None:
        self._perform(CheckoutAction.FINISH, self.finish_button)

    def back_home(self) -> None:
        self._perform(CheckoutAction.BACK_HOME, self.back_home_button)

    def complete_checkout(self, info: CheckoutInfo) -> None:
        self.submit_info(info)
        self.finish()

    def _perform(
        self, action: CheckoutAction, button: Locator, info: CheckoutInfo | None = None
    ) -> None:
        step = self.current_step()
        target = next_screen(step, action, info) if step is not None else None
        button.click()
        if target is not None and target is not self.current_screen():
            # Wait for the route change instead of asserting it
            self.page.wait_for_url(f"**/{target.path}*")
        self.page.wait_for_load_state()
        logger.debug(
            "checkout_action",
            action=action.value,
            from_step=step.value if step else None,
            expected_screen=target.value if target else None,
        )

    def _entered_info(self) -> CheckoutInfo | None:
        if not self.first_name_input.is_visible():
            return None
        return CheckoutInfo(
            first_name=self.first_name_input.input_value(),
            last_name=self.last_name_input.input_value(),
            postal_code=self.postal_code_input.input_value(),
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def current_step(self) -> CheckoutStep | None:
        """Checkout step shown right now, None outside the flow."""
        return CheckoutStep.from_screen(self.current_screen())

    def is_on_info_step(self) -> bool:
        return self.first_name_input.is_visible()

    def is_on_overview_step(self) -> bool:
        return self.finish_button.is_visible()

    def is_order_complete(self) -> bool:
        return self.complete_header.is_visible()

    def get_error_message(self) -> str:
        return self._text(self.error_message)

    def has_error(self) -> bool:
        return self.error_message.is_visible()

    def get_subtotal(self) -> float:
        return self._amount(self.subtotal_label)

    def get_tax(self) -> float:
        return self._amount(self.tax_label)

    def get_total(self) -> float:
        return self._amount(self.total_label)

    def verify_total(self) -> bool:
        """Total equals subtotal plus tax within a cent."""
        return abs(self.get_total() - (self.get_subtotal() + self.get_tax())) < TOTAL_TOLERANCE

    def get_payment_info(self) -> str:
        return self._text(self.payment_info)

    def get_shipping_info(self) -> str:
        return self._text(self.shipping_info)

    def get_complete_header(self) -> str:
        return self._text(self.complete_header)

    def get_complete_text(self) -> str:
        return self._text(self.complete_text)

    def _amount(self, label: Locator) -> float:
        text = self._text(label)
        return parse_price(text) if text else 0.0
