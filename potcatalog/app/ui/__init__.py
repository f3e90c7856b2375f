"""Presentation layer: theme, layouts and reusable components."""
