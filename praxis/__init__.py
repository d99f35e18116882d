"""Praxis landing page: style resolution, view composition and SSR shell."""

__version__ = "0.1.0"
