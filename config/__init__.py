"""
Configuration module for the application.
Exports the settings instance for use throughout the application.
"""

from config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
