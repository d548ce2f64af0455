"""Configuration module for the Access Control client."""
from .settings import AccessControlSettings, load_settings

__all__ = ["AccessControlSettings", "load_settings"]
