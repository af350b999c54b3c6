"""Shopping cart screen."""

from __future__ import annotations

import structlog
from playwright.sync_api import Locator

from swaglabs.data.models import CartLine
from swaglabs.pages.base_page import BasePage
from swaglabs.utils.helpers import parse_price

logger = structlog.get_logger()


class CartPage(BasePage):
    """Cart lines are read back from the page on every call, never stored."""

    @property
    def cart_container(self) -> Locator:
        return self.page.locator(".cart_contents_container")

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.locator('[data-test="continue-shopping"]')

    @property
    def checkout_button(self) -> Locator:
        return self.page.locator('[data-test="checkout"]')

    def get_cart_items(self) -> Locator:
        return self.page.locator(".cart_item")

    def get_cart_item_by_name(self, product_name: str) -> Locator:
        return self.get_cart_items().filter(has_text=product_name)

    def get_remove_button(self, product_name: str) -> Locator:
        return self.get_cart_item_by_name(product_name).get_by_role("button", name="Remove")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def remove_product(self, product_name: str) -> None:
        self.get_remove_button(product_name).click()
        logger.debug("cart_line_removed", product=product_name)

    def remove_all_products(self) -> None:
        for name in self.get_all_product_names():
            self.remove_product(name)

    def continue_shopping(self) -> None:
        self.continue_shopping_button.click()
        self.page.wait_for_load_state()

    def checkout(self) -> None:
        self.checkout_button.click()
        self.page.wait_for_load_state()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_on_cart_page(self) -> bool:
        return self.cart_container.is_visible()

    def get_cart_item_count(self) -> int:
        """Number of lines in the cart list (not the header badge)."""
        return self.get_cart_items().count()

    def is_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def get_all_product_names(self) -> list[str]:
        return self.page.locator(".cart_item .inventory_item_name").all_text_contents()

    def get_all_product_prices(self) -> list[float]:
        texts = self.page.locator(".cart_item .inventory_item_price").all_text_contents()
        return [parse_price(text) for text in texts]

    def get_all_cart_items(self) -> list[CartLine]:
        lines = []
        rows = self.get_cart_items()
        for i in range(rows.count()):
            row = rows.nth(i)
            price_text = self._text(row.locator(".inventory_item_price"))
            lines.append(
                CartLine(
                    name=self._text(row.locator(".inventory_item_name")),
                    description=self._text(row.locator(".inventory_item_desc")),
                    price=parse_price(price_text) if price_text else 0.0,
                )
            )
        return lines

    def is_product_in_cart(self, product_name: str) -> bool:
        return self.get_cart_item_by_name(product_name).count() > 0

    def find_cart_item(self, product_name: str) -> CartLine | None:
        return next(
            (line for line in self.get_all_cart_items() if line.name == product_name), None
        )

    def get_total_price(self) -> float:
        return round(sum(self.get_all_product_prices()), 2)

    def get_cart_items_sorted_by_price(self, ascending: bool = True) -> list[CartLine]:
        return sorted(self.get_all_cart_items(), key=lambda line: line.price, reverse=not ascending)
