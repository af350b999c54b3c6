"""
Test Helpers

Pure functions for common test operations: random data, price formatting,
sequence checks and count assertions. No browser needed.
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TypeVar

import structlog

from swaglabs.data.models import CheckoutInfo

logger = structlog.get_logger()

T = TypeVar("T")

_ALPHANUMERIC = string.ascii_letters + string.digits
_PRICE_PATTERN = re.compile(r"-?\d[\d,]*(?:\.\d+)?")


def random_string(length: int = 10) -> str:
    """Random alphanumeric string of `length` characters."""
    return "".join(random.choices(_ALPHANUMERIC, k=length))


def random_email() -> str:
    """
    Random throwaway address.

    Example:
        random_email()  # "test_a8Kd02Lm@example.com"
    """
    return f"test_{random_string(8)}@example.com"


def get_timestamp() -> str:
    """Current UTC time in ISO 8601."""
    return datetime.now(UTC).isoformat()


def format_price(price: float) -> str:
    """
    Format a price the way the storefront renders it.

    Example:
        format_price(29.99)  # "$29.99"
    """
    return f"${price:.2f}"


def parse_price(price_string: str) -> float:
    """
    Extract the amount from a price string or summary label.

    Args:
        price_string: "$29.99", "29.99" or "Item total: $39.98"

    Returns:
        The amount as float

    Raises:
        ValueError: If the string contains no number
    """
    match = _PRICE_PATTERN.search(price_string.replace("$", " "))
    if match is None:
        raise ValueError(f"No price found in {price_string!r}")
    return float(match.group(0).replace(",", ""))


def arrays_equal(first: Sequence[T], second: Sequence[T]) -> bool:
    """Element-wise equality, order included."""
    return len(first) == len(second) and all(a == b for a, b in zip(first, second))


def is_sorted_ascending(values: Sequence[T]) -> bool:
    """True for empty and single-element sequences."""
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


def is_sorted_descending(values: Sequence[T]) -> bool:
    """True for empty and single-element sequences."""
    return all(values[i] >= values[i + 1] for i in range(len(values) - 1))


def random_item(values: Sequence[T]) -> T:
    if not values:
        raise ValueError("Cannot pick from an empty sequence")
    return random.choice(values)


def random_items(values: Sequence[T], count: int) -> list[T]:
    """Up to `count` distinct picks, in random order."""
    return random.sample(list(values), min(count, len(values)))


def chunk_array(values: Sequence[T], size: int) -> list[list[T]]:
    """
    Split into consecutive chunks of `size`; the last may be shorter.

    Example:
        chunk_array([1, 2, 3, 4, 5], 2)  # [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise ValueError(f"Chunk size must be >= 1, got {size}")
    return [list(values[i : i + size]) for i in range(0, len(values), size)]


def assert_count(actual: int, expected: int, message: str = "Count mismatch") -> None:
    """Raise AssertionError carrying expected vs actual when they differ."""
    if actual != expected:
        raise AssertionError(f"{message}: expected {expected}, got {actual}")


def log_step(step: str) -> None:
    """Record a named scenario step in the structured log."""
    logger.info("step", step=step, at=get_timestamp())


def create_checkout_info() -> CheckoutInfo:
    """Random but complete shipper details."""
    return CheckoutInfo(
        first_name=f"Test{random_string(5)}",
        last_name=f"User{random_string(5)}",
        postal_code=str(random.randint(10000, 99999)),
    )
