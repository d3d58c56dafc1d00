"""
Routers package
"""

# Import all routers to make them available
from . import health
from . import extraction
from . import prediction

__all__ = [
    'health',
    'extraction',
    'prediction',
]
