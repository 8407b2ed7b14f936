"""Scan pipeline: walk, resolve, evaluate."""
