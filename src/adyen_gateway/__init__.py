"""Adyen card payment gateway adapter."""

__version__ = "0.1.0"
