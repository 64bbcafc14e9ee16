"""Presentation layer: HTTP controllers."""
