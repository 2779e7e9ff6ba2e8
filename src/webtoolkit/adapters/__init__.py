"""Adapters between the value types and third-party libraries."""
