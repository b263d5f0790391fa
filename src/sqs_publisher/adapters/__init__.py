"""Adapters – queue service integrations."""
