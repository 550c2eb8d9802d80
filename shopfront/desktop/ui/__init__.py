"""Flet UI: theme, components and layouts."""
