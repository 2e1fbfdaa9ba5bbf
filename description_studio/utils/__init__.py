"""
Utility modules for Description Studio
"""
from .settings_loader import AppSettings, load_settings

__all__ = [
    'AppSettings',
    'load_settings',
]
