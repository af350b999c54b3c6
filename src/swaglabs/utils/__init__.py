"""
Test Helpers

Pure functions plus the retry and polling wrappers.

Usage:
    from swaglabs.utils import parse_price, retry_action, wait_for_condition
"""

from swaglabs.utils.helpers import (
    arrays_equal,
    assert_count,
    chunk_array,
    create_checkout_info,
    format_price,
    get_timestamp,
    is_sorted_ascending,
    is_sorted_descending,
    log_step,
    parse_price,
    random_email,
    random_item,
    random_items,
    random_string,
)
from swaglabs.utils.retry import random_wait, retry_action, wait, wait_for_condition
from swaglabs.utils.screenshots import capture_failure_screenshot, take_timestamped_screenshot

__all__ = [
    "arrays_equal",
    "assert_count",
    "capture_failure_screenshot",
    "chunk_array",
    "create_checkout_info",
    "format_price",
    "get_timestamp",
    "is_sorted_ascending",
    "is_sorted_descending",
    "log_step",
    "parse_price",
    "random_email",
    "random_item",
    "random_items",
    "random_string",
    "random_wait",
    "retry_action",
    "take_timestamped_screenshot",
    "wait",
    "wait_for_condition",
]
