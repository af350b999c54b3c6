"""
Test Data Factories

Factory-boy based factories for generating test data.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import CheckoutInfoFactory

    info = CheckoutInfoFactory.build()
    missing_zip = CheckoutInfoFactory.build(postal_code="")

Pattern:
    - Records are frozen pydantic models, built in memory only
    - Subclasses describe named variants (locked user, free item, ...)
"""

from tests.support.factories.catalog_factory import CatalogItemFactory
from tests.support.factories.checkout_factory import CheckoutInfoFactory
from tests.support.factories.credential_factory import CredentialFactory

__all__ = ["CatalogItemFactory", "CheckoutInfoFactory", "CredentialFactory"]
