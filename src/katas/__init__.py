"""Katas - algorithm exercises and a validating CSS selector builder."""

__version__ = "0.1.0"
