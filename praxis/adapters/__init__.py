"""Adapters implementing component ports."""
