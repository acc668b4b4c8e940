"""
Configuration package for power diagram.

This package handles the numeric settings used by static layout
and group boundary annotation.
"""

from .layout_config import LayoutConfiguration, get_default_config

__all__ = [
    'LayoutConfiguration',
    'get_default_config',
]
