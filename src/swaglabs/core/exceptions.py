"""Swag Labs suite exception hierarchy.

This module defines the base exception class, the specialised exceptions
raised by page objects, fixtures and helpers, and the classification used
when a scenario fails.
"""

from __future__ import annotations

from enum import Enum

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class SwagLabsError(Exception):
    """Base exception for all suite errors.

    All custom exceptions in the suite inherit from this class so that
    fixtures and hooks can tell our failures apart from library ones.
    """

    pass


class ConfigurationError(SwagLabsError):
    """Raised when configuration or a test data file is invalid or missing.

    Example:
        raise ConfigurationError("users.json: Expecting value: line 1 column 1")
    """

    pass


class ValidationError(SwagLabsError, ValueError):
    """Raised when a value is rejected at a boundary.

    Example:
        raise ValidationError("Unknown sort option 'price'")
    """

    pass


class SetupError(SwagLabsError):
    """Raised when a fixture precondition did not reach its expected state.

    Reported by pytest as a setup error so the cause is not misattributed
    to the scenario body.

    Attributes:
        step: The setup step that failed (e.g. "await_inventory").

    Example:
        raise SetupError("await_inventory", "inventory not visible after 10000ms")
    """

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"Setup failed at {step}: {message}")


class RetryExhaustedError(SwagLabsError):
    """Raised when retry_action ran out of attempts.

    Only the last underlying failure is kept.

    Attributes:
        attempts: Number of attempts made.
        last_error: The exception raised by the final attempt.
    """

    def __init__(self, attempts: int, last_error: BaseException | None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        last_message = str(last_error) if last_error is not None else "unknown"
        super().__init__(
            f"Action failed after {attempts} attempts. Last error: {last_message}"
        )


class SnapshotMismatchError(AssertionError, SwagLabsError):
    """Raised when a screenshot differs from its baseline beyond the allowance.

    Attributes:
        name: Snapshot name.
        expected: Maximum differing pixels allowed.
        actual: Differing pixels found.
    """

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Snapshot {name!r} differs: expected at most {expected} different pixels, "
            f"got {actual}"
        )


class CheckoutTransitionError(SwagLabsError):
    """Invalid checkout step transition."""

    pass


class FailureKind(str, Enum):
    """How a failing scenario is reported."""

    SETUP = "setup"
    ASSERTION = "assertion"
    TIMEOUT = "timeout"
    RETRY_EXHAUSTED = "retry_exhausted"


def classify_failure(exc: BaseException | None, when: str = "call") -> FailureKind:
    """Map a scenario failure onto one of the four reported kinds.

    Args:
        exc: The exception that ended the scenario.
        when: The pytest phase ("setup", "call" or "teardown").

    Example:
        classify_failure(SetupError("login", "timed out"), "setup")  # FailureKind.SETUP
    """
    if when == "setup" or isinstance(exc, SetupError):
        return FailureKind.SETUP
    if isinstance(exc, RetryExhaustedError):
        return FailureKind.RETRY_EXHAUSTED
    if isinstance(exc, (PlaywrightTimeoutError, TimeoutError)):
        return FailureKind.TIMEOUT
    # pytest-timeout fails the scenario with a plain Failed("Timeout >30.0s")
    if exc is not None and str(exc).startswith("Timeout >"):
        return FailureKind.TIMEOUT
    return FailureKind.ASSERTION
