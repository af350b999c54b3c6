"""Product detail screen."""

from __future__ import annotations

from playwright.sync_api import Locator

from swaglabs.data.models import ProductDetails
from swaglabs.pages.base_page import BasePage
from swaglabs.utils.helpers import parse_price


class ProductPage(BasePage):
    """Single product with its add/remove button."""

    @property
    def back_to_products_button(self) -> Locator:
        return self.page.locator('[data-test="back-to-products"]')

    @property
    def product_name(self) -> Locator:
        return self.page.locator(".inventory_details_name")

    @property
    def product_description(self) -> Locator:
        return self.page.locator(".inventory_details_desc")

    @property
    def product_price(self) -> Locator:
        return self.page.locator(".inventory_details_price")

    @property
    def product_image(self) -> Locator:
        return self.page.locator(".inventory_details_img")

    @property
    def add_to_cart_button(self) -> Locator:
        return self.page.get_by_role("button", name="Add to cart")

    @property
    def remove_button(self) -> Locator:
        return self.page.get_by_role("button", name="Remove")

    def is_on_product_page(self) -> bool:
        return self.product_name.is_visible()

    def add_to_cart(self) -> None:
        self.add_to_cart_button.click()

    def remove_from_cart(self) -> None:
        self.remove_button.click()

    def is_in_cart(self) -> bool:
        return self.remove_button.is_visible()

    def go_back_to_products(self) -> None:
        self.back_to_products_button.click()
        self.page.wait_for_load_state()

    def get_product_name(self) -> str:
        return self._text(self.product_name)

    def get_product_description(self) -> str:
        return self._text(self.product_description)

    def get_product_price(self) -> str:
        return self._text(self.product_price)

    def get_product_image_url(self) -> str | None:
        if self.product_image.count() == 0:
            return None
        return self.product_image.first.get_attribute("src")

    def get_product_details(self) -> ProductDetails:
        return ProductDetails(
            name=self.get_product_name(),
            description=self.get_product_description(),
            price=self.get_product_price(),
            image_url=self.get_product_image_url(),
        )

    def verify_product_details(self, **expected: str | None) -> bool:
        """Compare the displayed details against the given fields only."""
        return self.get_product_details().matches(**expected)

    def get_numeric_price(self) -> float:
        """Displayed price as a number; 0.0 when no price is shown."""
        text = self.get_product_price()
        return parse_price(text) if text else 0.0
