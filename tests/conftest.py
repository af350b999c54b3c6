"""Shared pytest fixtures for the Swag Labs suite.

This module provides fixtures for:
- Test environment variables and settings
- Structured logging for the whole session
- Test data (credentials, catalog) and data factories
- Failure classification in the test report

Usage:
    @pytest.mark.unit
    def test_something(catalog):
        assert catalog.find("Sauce Labs Backpack") is not None
"""

import os
from collections.abc import Generator

import pytest
import structlog

from swaglabs.config.logging import configure_logging, scenario_context
from swaglabs.config.settings import Settings, get_settings
from swaglabs.core.exceptions import classify_failure
from swaglabs.data.loader import Catalog, CredentialStore, get_catalog, get_credentials
from tests.support.factories import CatalogItemFactory, CheckoutInfoFactory, CredentialFactory

logger = structlog.get_logger()

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("LOG_LEVEL", "INFO")

    get_settings.cache_clear()
    configure_logging(get_settings())

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def scenario_logging(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Tag every event logged during a test with its node id."""
    with scenario_context(request.node.nodeid):
        yield


@pytest.fixture(scope="session")
def settings(setup_test_environment: None) -> Settings:
    """Settings for the run (environment + .env)."""
    return get_settings()


# =============================================================================
# Test Data
# =============================================================================


@pytest.fixture(scope="session")
def credentials() -> CredentialStore:
    """Credential records, loaded once and shared read-only."""
    return get_credentials()


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """Catalog records, loaded once and shared read-only."""
    return get_catalog()


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def credential_factory() -> type[CredentialFactory]:
    """Provide credential factory for building ad-hoc credentials."""
    return CredentialFactory


@pytest.fixture
def catalog_item_factory() -> type[CatalogItemFactory]:
    """Provide catalog item factory for building ad-hoc products."""
    return CatalogItemFactory


@pytest.fixture
def checkout_info_factory() -> type[CheckoutInfoFactory]:
    """Provide checkout info factory for building shipper details."""
    return CheckoutInfoFactory


# =============================================================================
# Reporting
# =============================================================================


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo) -> Generator:
    """Store each phase's report and tag failures with their kind."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    if rep.failed and call.excinfo is not None:
        kind = classify_failure(call.excinfo.value, rep.when)
        rep.sections.append(("failure kind", kind.value))
        logger.error(
            "scenario_failed",
            scenario=item.nodeid,
            phase=rep.when,
            kind=kind.value,
            error=str(call.excinfo.value).splitlines()[0] if str(call.excinfo.value) else "",
        )


def pytest_report_teststatus(report: pytest.TestReport, config: pytest.Config):
    """Show setup failures as SETUP-ERROR rather than a plain error."""
    if report.when == "setup" and report.failed:
        return "error", "E", ("SETUP-ERROR", {"red": True})
    return None


