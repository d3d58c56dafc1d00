"""
Pydantic schemas for API request/response validation
"""
from .extraction import ExtractionResponse
from .prediction import PredictionRequest, PredictionResponse
from .common import ErrorResponse

__all__ = [
    # Extraction
    "ExtractionResponse",
    # Prediction
    "PredictionRequest",
    "PredictionResponse",
    # Common
    "ErrorResponse",
]
