"""Configuration for the AI Band Registry service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
