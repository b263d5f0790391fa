"""Configuration – env-based publisher settings and validation errors."""
