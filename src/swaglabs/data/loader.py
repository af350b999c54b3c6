"""Load the credential and catalog records.

Both files are read once per process (see get_credentials / get_catalog) and
exposed through immutable stores. Lookups that may miss return None so the
caller has to handle absence explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

import pydantic
import structlog
from pydantic import TypeAdapter

from swaglabs.config.settings import get_settings
from swaglabs.core.exceptions import ConfigurationError
from swaglabs.data.models import CatalogItem, Credential, CredentialKind

logger = structlog.get_logger()

DATA_DIR = Path(__file__).parent
USERS_FILE = DATA_DIR / "users.json"
PRODUCTS_FILE = DATA_DIR / "products.json"

_CREDENTIALS_ADAPTER = TypeAdapter(list[Credential])
_CATALOG_ADAPTER = TypeAdapter(list[CatalogItem])


class CredentialStore:
    """Read-only view over the credential records."""

    def __init__(self, credentials: Iterable[Credential]) -> None:
        self._credentials = tuple(credentials)

    def __len__(self) -> int:
        return len(self._credentials)

    def __iter__(self):
        return iter(self._credentials)

    def all(self) -> tuple[Credential, ...]:
        return self._credentials

    def of_kind(self, kind: CredentialKind) -> tuple[Credential, ...]:
        return tuple(c for c in self._credentials if c.kind is kind)

    def valid(self) -> tuple[Credential, ...]:
        return self.of_kind(CredentialKind.VALID)

    def locked(self) -> tuple[Credential, ...]:
        return self.of_kind(CredentialKind.LOCKED)

    def invalid(self) -> tuple[Credential, ...]:
        return self.of_kind(CredentialKind.INVALID)

    def find(self, username: str) -> Credential | None:
        """Return the record for `username`, or None if there is none."""
        return next((c for c in self._credentials if c.username == username), None)

    def default(self, username: str | None = None) -> Credential:
        """Return the credential used by authenticated fixtures.

        Raises:
            ConfigurationError: If the username is unknown or not a valid login.
        """
        username = username or get_settings().default_username
        credential = self.find(username)
        if credential is None:
            raise ConfigurationError(f"Default user {username!r} not found in users data")
        if not credential.expects_success:
            raise ConfigurationError(
                f"Default user {username!r} is {credential.kind.value}, not valid"
            )
        return credential


class Catalog:
    """Read-only view over the catalog records, in file order."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        return self._items

    def names(self) -> list[str]:
        return [item.name for item in self._items]

    def prices(self) -> list[float]:
        return [item.price for item in self._items]

    def first(self, count: int) -> tuple[CatalogItem, ...]:
        return self._items[:count]

    def find(self, name: str) -> CatalogItem | None:
        """Return the item called `name`, or None."""
        return next((item for item in self._items if item.name == name), None)

    def get(self, name: str) -> CatalogItem:
        item = self.find(name)
        if item is None:
            raise KeyError(name)
        return item

    @staticmethod
    def subtotal(items: Iterable[CatalogItem]) -> float:
        """Sum of item prices, rounded to cents."""
        return round(sum(item.price for item in items), 2)


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ConfigurationError(f"Cannot read test data file {path}: {e}") from e


def load_credentials(path: Path | None = None) -> CredentialStore:
    """Parse and validate a users file.

    Raises:
        ConfigurationError: On a missing file, malformed JSON, invalid record
            or duplicate username.
    """
    path = path or get_settings().users_file or USERS_FILE
    try:
        credentials = _CREDENTIALS_ADAPTER.validate_json(_read(path))
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid users data in {path}: {e}") from e

    usernames = [c.username for c in credentials]
    duplicates = sorted({u for u in usernames if usernames.count(u) > 1})
    if duplicates:
        raise ConfigurationError(f"Duplicate usernames in {path}: {duplicates}")

    logger.debug("credentials_loaded", path=str(path), count=len(credentials))
    return CredentialStore(credentials)


def load_catalog(path: Path | None = None) -> Catalog:
    """Parse and validate a products file.

    Raises:
        ConfigurationError: On a missing file, malformed JSON or invalid record
            (e.g. a negative price).
    """
    path = path or get_settings().products_file or PRODUCTS_FILE
    try:
        items = _CATALOG_ADAPTER.validate_json(_read(path))
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid products data in {path}: {e}") from e

    logger.debug("catalog_loaded", path=str(path), count=len(items))
    return Catalog(items)


@lru_cache
def get_credentials() -> CredentialStore:
    """Get the process-wide credential store."""
    return load_credentials()


@lru_cache
def get_catalog() -> Catalog:
    """Get the process-wide catalog."""
    return load_catalog()
