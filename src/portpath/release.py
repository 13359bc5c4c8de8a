# Copyright (c) 2024 Portpath Contributors
# MIT License

"""Portpath release metadata."""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Portpath Contributors"
__codename__ = "Waypoint"

# Version info tuple for programmatic comparison
VERSION_INFO = (0, 1, 0)
