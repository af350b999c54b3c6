"""Page objects, fixtures support and helpers for the Swag Labs storefront suite."""

__version__ = "1.0.0"
