"""Value records for credentials, catalog items and checkout data.

Credential and catalog records are loaded once from the packaged JSON files
and never mutated. Cart lines and checkout submissions are built per test.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from swaglabs.core.exceptions import ValidationError


class CredentialKind(str, Enum):
    """Expected outcome class of a credential."""

    VALID = "valid"  # Lands on the inventory screen
    LOCKED = "locked"  # Stays on login with a locked-out error
    INVALID = "invalid"  # Stays on login with a mismatch error


class Credential(BaseModel):
    """A username/password pair and what logging in with it should do."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    kind: CredentialKind

    @property
    def expects_success(self) -> bool:
        return self.kind is CredentialKind.VALID

    def __repr__(self) -> str:
        # Keep passwords out of assertion output and logs
        return f"Credential(username={self.username!r}, kind={self.kind.value!r})"


class CatalogItem(BaseModel):
    """One purchasable product as listed in the storefront."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    description: str = ""

    @property
    def display_price(self) -> str:
        """Price as rendered by the storefront, e.g. "$29.99"."""
        return f"${self.price:.2f}"


class CheckoutInfo(BaseModel):
    """Shipper details submitted on the first checkout step."""

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    postal_code: str = ""

    def missing_field(self) -> str | None:
        """Return the first empty field in form order, or None."""
        for field_name in ("first_name", "last_name", "postal_code"):
            if not getattr(self, field_name):
                return field_name
        return None

    @property
    def is_complete(self) -> bool:
        return self.missing_field() is None


class CartLine(BaseModel):
    """One row of the cart screen, read back from the live page."""

    name: str
    description: str = ""
    price: float = 0.0
    quantity: int = 1  # The storefront never shows quantities above one


class ProductDetails(BaseModel):
    """Contents of the product detail screen."""

    name: str
    description: str
    price: str
    image_url: str | None = None

    def matches(self, **expected: str | None) -> bool:
        """Compare only the given fields.

        Example:
            details.matches(name="Sauce Labs Backpack", price="$29.99")
        """
        unknown = set(expected) - set(type(self).model_fields)
        if unknown:
            raise ValidationError(f"Unknown product fields: {sorted(unknown)}")
        return all(getattr(self, key) == value for key, value in expected.items())


class SortOption(str, Enum):
    """Tokens accepted by the inventory sort dropdown."""

    AZ = "az"  # Name (A to Z)
    ZA = "za"  # Name (Z to A)
    LOHI = "lohi"  # Price (low to high)
    HILO = "hilo"  # Price (high to low)

    @classmethod
    def parse(cls, value: SortOption | str) -> SortOption:
        """Accept a member or its token, reject anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(option.value for option in cls)
            raise ValidationError(
                f"Unknown sort option {value!r}; expected one of: {allowed}"
            ) from None

    @property
    def key(self) -> str:
        return "name" if self in (SortOption.AZ, SortOption.ZA) else "price"

    @property
    def descending(self) -> bool:
        return self in (SortOption.ZA, SortOption.HILO)

    def apply(self, items: Iterable[CatalogItem]) -> list[CatalogItem]:
        """Order catalog items the way the storefront does for this option.

        Equal prices are ordered by name, so each descending order is the
        exact reverse of its ascending counterpart.
        """
        return sorted(
            items,
            key=lambda item: (getattr(item, self.key), item.name, item.id),
            reverse=self.descending,
        )


class Screen(str, Enum):
    """Logical screens of the storefront."""

    LOGIN = "login"
    INVENTORY = "inventory"
    PRODUCT = "product"
    CART = "cart"
    CHECKOUT_INFO = "checkout_info"
    CHECKOUT_OVERVIEW = "checkout_overview"
    CHECKOUT_COMPLETE = "checkout_complete"

    @property
    def path(self) -> str:
        """Last URL path segment of the screen ("" for login)."""
        return _SCREEN_PATHS[self]

    @classmethod
    def from_url(cls, url: str) -> Screen | None:
        """Map a storefront URL to its screen, None for unknown paths."""
        path = urlparse(url).path.rstrip("/")
        if path in ("", "/index.html"):
            return cls.LOGIN
        segment = path.rsplit("/", 1)[-1]
        return next((screen for screen, p in _SCREEN_PATHS.items() if p == segment), None)


_SCREEN_PATHS: dict[Screen, str] = {
    Screen.LOGIN: "",
    Screen.INVENTORY: "inventory.html",
    Screen.PRODUCT: "inventory-item.html",
    Screen.CART: "cart.html",
    Screen.CHECKOUT_INFO: "checkout-step-one.html",
    Screen.CHECKOUT_OVERVIEW: "checkout-step-two.html",
    Screen.CHECKOUT_COMPLETE: "checkout-complete.html",
}
