"""Readium locator, presentation and link property models."""

__version__ = "0.1.0"
