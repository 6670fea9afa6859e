"""
Core Package
============

Settings and process-wide setup.
"""
from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
