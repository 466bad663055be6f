"""Flat JSON relay in front of an Invidious instance."""

__version__ = "0.1.0"
