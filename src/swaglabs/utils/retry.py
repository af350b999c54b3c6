"""
Wait Helpers

Retry, polling and fixed-delay utilities.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import random
import time
from typing import Callable, TypeVar

import structlog
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from swaglabs.core.exceptions import RetryExhaustedError

logger = structlog.get_logger()

T = TypeVar("T")


def wait(ms: int = 1000) -> None:
    """Block for `ms` milliseconds."""
    time.sleep(ms / 1000)


def random_wait(min_ms: int, max_ms: int) -> None:
    """Block for a random duration in [min_ms, max_ms]."""
    if min_ms > max_ms:
        raise ValueError(f"min_ms ({min_ms}) is greater than max_ms ({max_ms})")
    wait(random.randint(min_ms, max_ms))


def retry_action(
    action: Callable[[], T],
    max_attempts: int = 3,
    delay_ms: int = 1000,
) -> T:
    """
    Call an action until it succeeds or attempts run out.

    Args:
        action: Zero-argument callable
        max_attempts: Total calls allowed, at least 1
        delay_ms: Fixed pause between attempts (not after the last one)

    Returns:
        The first successful result

    Raises:
        RetryExhaustedError: Carrying only the last failure

    Example:
        price = retry_action(lambda: inventory.get_product_price("Sauce Labs Onesie"))
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    retrying = Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(delay_ms / 1000),
        retry=retry_if_exception_type(Exception),
        after=_log_failed_attempt,
    )
    try:
        return retrying(action)
    except RetryError as e:
        last_error = e.last_attempt.exception()
        raise RetryExhaustedError(max_attempts, last_error) from last_error


def _log_failed_attempt(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.debug("retry_attempt_failed", attempt=retry_state.attempt_number, error=str(error))


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
        timeout_seconds: Maximum time to wait
        poll_interval_seconds: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        TimeoutError: If condition not met within timeout

    Example:
        # Wait for the cart badge to show two items
        wait_for_condition(
            action=inventory.get_cart_item_count,
            condition=lambda count: count == 2,
            timeout_seconds=5.0,
        )
    """
    start_time = time.monotonic()
    last_result: T | None = None

    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        if time.monotonic() - start_time >= timeout_seconds:
            break

        time.sleep(poll_interval_seconds)

    raise TimeoutError(f"{error_message}. Last result: {last_result}")
