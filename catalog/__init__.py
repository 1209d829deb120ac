"""Catalog lookup services: templates and review types."""
