"""Encrypted credential vault, credential records and password generation."""

__version__ = "1.0.0"