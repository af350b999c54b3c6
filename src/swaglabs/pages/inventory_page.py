"""Inventory (product listing) screen."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator

from swaglabs.data.models import SortOption
from swaglabs.pages.base_page import BasePage
from swaglabs.utils.helpers import parse_price
from swaglabs.utils.retry import wait_for_condition

logger = structlog.get_logger()


class InventoryPage(BasePage):
    """Product grid, sort dropdown, cart badge and side menu."""

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def inventory_container(self) -> Locator:
        return self.page.locator(".inventory_container")

    @property
    def sort_dropdown(self) -> Locator:
        return self.page.locator('[data-test="product-sort-container"]')

    @property
    def burger_menu_button(self) -> Locator:
        return self.page.locator("#react-burger-menu-btn")

    @property
    def logout_link(self) -> Locator:
        return self.page.locator("#logout_sidebar_link")

    def get_product_items(self) -> Locator:
        return self.page.locator(".inventory_item")

    def get_product_by_name(self, product_name: str) -> Locator:
        return self.get_product_items().filter(has_text=product_name)

    def get_add_to_cart_button(self, product_name: str) -> Locator:
        return self.get_product_by_name(product_name).get_by_role("button", name="Add to cart")

    def get_remove_button(self, product_name: str) -> Locator:
        return self.get_product_by_name(product_name).get_by_role("button", name="Remove")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def sort_products(self, option: SortOption | str) -> None:
        """Select a sort mode; anything outside SortOption is rejected."""
        option = SortOption.parse(option)
        self.sort_dropdown.select_option(option.value)
        logger.debug("products_sorted", option=option.value)

    def add_product_to_cart(self, product_name: str) -> None:
        self.get_add_to_cart_button(product_name).click()
        logger.debug("product_added", product=product_name)

    def remove_product_from_cart(self, product_name: str) -> None:
        self.get_remove_button(product_name).click()
        logger.debug("product_removed", product=product_name)

    def add_multiple_products_to_cart(self, product_names: list[str]) -> None:
        for product_name in product_names:
            self.add_product_to_cart(product_name)

    def click_product(self, product_name: str) -> None:
        self.get_product_by_name(product_name).locator(".inventory_item_name").click()
        self.page.wait_for_load_state()

    def open_menu(self) -> None:
        self.burger_menu_button.click()
        # The side menu slides in; wait for the link rather than a fixed delay
        self.logout_link.wait_for(state="visible")

    def logout(self) -> None:
        self.open_menu()
        self.logout_link.click()
        self.page.wait_for_load_state()

    def wait_for_cart_count(self, expected: int, timeout_seconds: float = 5.0) -> int:
        """Poll the badge until it shows `expected`; raises TimeoutError otherwise."""
        return wait_for_condition(
            action=self.get_cart_item_count,
            condition=lambda count: count == expected,
            timeout_seconds=timeout_seconds,
            poll_interval_seconds=0.1,
            error_message=f"Cart badge never showed {expected}",
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_on_inventory_page(self) -> bool:
        return self.inventory_container.is_visible()

    def get_all_product_names(self) -> list[str]:
        return self.page.locator(".inventory_item_name").all_text_contents()

    def get_all_product_prices(self) -> list[float]:
        texts = self.page.locator(".inventory_item_price").all_text_contents()
        return [parse_price(text) for text in texts]

    def get_product_price(self, product_name: str) -> str:
        """Displayed price text of one product, "" when not listed."""
        return self._text(
            self.get_product_by_name(product_name).locator(".inventory_item_price")
        )

    def is_product_in_cart(self, product_name: str) -> bool:
        """A listed product is in the cart when its button reads Remove."""
        return self.get_remove_button(product_name).is_visible()
