"""
Utilities package
"""

from .helpers import InvalidImageError, load_image

__all__ = [
    'InvalidImageError',
    'load_image',
]
