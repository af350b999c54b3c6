"""
Page Objects

Page Object Model (POM) for the Swag Labs storefront.
Encapsulates page interactions and locators.

Usage:
    from swaglabs.pages import Pages

    pages = Pages(page)
    pages.login_page.goto()
    pages.login_page.login("standard_user", "secret_sauce")

Pattern:
    - One class per screen
    - Properties for locators (re-resolved on every access)
    - Methods for actions (click, fill) and queries
    - No assertions inside page objects
"""

from functools import cached_property

from playwright.sync_api import Page

from swaglabs.pages.base_page import BasePage
from swaglabs.pages.cart_page import CartPage
from swaglabs.pages.checkout_page import CheckoutPage
from swaglabs.pages.inventory_page import InventoryPage
from swaglabs.pages.login_page import LoginPage
from swaglabs.pages.product_page import ProductPage


class Pages:
    """
    One instance of each page object per browser page, built on first use.
    """

    def __init__(self, page: Page):
        self.page = page

    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.page)

    @cached_property
    def inventory_page(self) -> InventoryPage:
        return InventoryPage(self.page)

    @cached_property
    def product_page(self) -> ProductPage:
        return ProductPage(self.page)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.page)

    @cached_property
    def checkout_page(self) -> CheckoutPage:
        return CheckoutPage(self.page)


__all__ = [
    "BasePage",
    "CartPage",
    "CheckoutPage",
    "InventoryPage",
    "LoginPage",
    "Pages",
    "ProductPage",
]
