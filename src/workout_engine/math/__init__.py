"""Numeric helpers: training load and integer time allocation."""
