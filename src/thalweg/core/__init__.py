"""Geometry, configuration and error types."""
