"""Bulma CSS components as composable Python objects that render to HTML."""

__version__ = "0.1.0"