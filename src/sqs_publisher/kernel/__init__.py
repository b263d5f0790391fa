"""Kernel – errors, messaging primitives and ports, template rendering."""
