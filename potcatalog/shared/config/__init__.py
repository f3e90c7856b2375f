"""
Shared Config Module
====================

Configuration data shipped with the package.

Structure:
- settings/: YAML configuration files (defaults.yaml bundled; user.yaml and
  project.yaml are optional local overrides)
"""

from pathlib import Path

SETTINGS_DIR = Path(__file__).resolve().parent / "settings"

__all__ = ["SETTINGS_DIR"]
