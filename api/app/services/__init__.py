"""
Services package
"""

# Import all services to make them available
from . import extraction_service
from . import prediction_service

__all__ = [
    'extraction_service',
    'prediction_service',
]
