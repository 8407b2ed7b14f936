"""Hierarchical content-policy linter."""

__version__ = "0.1.0"
