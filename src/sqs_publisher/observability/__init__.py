"""Observability – structured logging setup."""
