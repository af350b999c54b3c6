"""HTTP clients used by the API suite."""

from swaglabs.api.client import JsonPlaceholderClient

__all__ = ["JsonPlaceholderClient"]
