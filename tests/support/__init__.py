"""Shared test support: data factories."""
