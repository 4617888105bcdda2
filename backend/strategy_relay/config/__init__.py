"""
PURPOSE: Export configuration settings for the Strategic Update Relay.
"""

from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
