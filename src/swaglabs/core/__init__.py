"""Core error types shared by pages, fixtures and helpers."""

from swaglabs.core.exceptions import (
    CheckoutTransitionError,
    ConfigurationError,
    FailureKind,
    RetryExhaustedError,
    SetupError,
    SnapshotMismatchError,
    SwagLabsError,
    ValidationError,
    classify_failure,
)

__all__ = [
    "CheckoutTransitionError",
    "ConfigurationError",
    "FailureKind",
    "RetryExhaustedError",
    "SetupError",
    "SnapshotMismatchError",
    "SwagLabsError",
    "ValidationError",
    "classify_failure",
]
