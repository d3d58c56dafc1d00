from fastapi import APIRouter, HTTPException
import logging

from schemas import PredictionRequest, PredictionResponse
from services.prediction_service import PredictionService
from clients import PredictionServiceError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Prediction"])

prediction_service = PredictionService()


@router.post("/predict", response_model=PredictionResponse)
def predict(request: PredictionRequest):
    """Forward the form values to the prediction service"""
    try:
        return prediction_service.predict(request)
    except PredictionServiceError as e:
        logger.error(f"Prediction error: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
