"""Postal code lookup for the Federal Capital Territory with typo-tolerant matching."""

__version__ = "0.1.0"
