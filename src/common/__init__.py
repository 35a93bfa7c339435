"""Shared helpers: logging and HTTP access."""
