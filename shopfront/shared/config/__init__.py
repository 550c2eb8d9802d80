"""
Shared Config Module
====================

Settings files shipped with Shopfront.

Structure:
- settings/defaults.yaml: system defaults (lowest precedence)
- settings/user.yaml: optional user overrides, written by ConfigManager
"""

from pathlib import Path

SETTINGS_DIR = Path(__file__).parent / "settings"

__all__ = ["SETTINGS_DIR"]
