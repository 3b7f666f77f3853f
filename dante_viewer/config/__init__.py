"""
Configuration management for the network viewer.
"""

from .viewer_config import ViewerConfig

__all__ = [
    'ViewerConfig'
]
