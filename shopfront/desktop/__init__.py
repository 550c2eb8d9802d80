"""Shopfront desktop app (Flet + FletXr)."""
