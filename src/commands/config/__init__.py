"""
Config Commands Package

This package contains the configuration-related CLI commands:
- settings.py - Configuration display commands
"""

from .settings import show

__all__ = [
    'show'
]
