"""Test data records and the checkout state machine.

Usage:
    from swaglabs.data import get_catalog, get_credentials

    backpack = get_catalog().find("Sauce Labs Backpack")
    if backpack is None:
        ...
"""

from swaglabs.data.checkout import CheckoutAction, CheckoutStep, next_screen
from swaglabs.data.loader import (
    Catalog,
    CredentialStore,
    get_catalog,
    get_credentials,
    load_catalog,
    load_credentials,
)
from swaglabs.data.models import (
    CartLine,
    CatalogItem,
    CheckoutInfo,
    Credential,
    CredentialKind,
    ProductDetails,
    Screen,
    SortOption,
)

__all__ = [
    "CartLine",
    "Catalog",
    "CatalogItem",
    "CheckoutAction",
    "CheckoutInfo",
    "CheckoutStep",
    "Credential",
    "CredentialKind",
    "CredentialStore",
    "ProductDetails",
    "Screen",
    "SortOption",
    "get_catalog",
    "get_credentials",
    "load_catalog",
    "load_credentials",
    "next_screen",
]
