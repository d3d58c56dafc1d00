import logging
from typing import Optional

from clients import PredictionClient
from schemas import PredictionRequest, PredictionResponse

logger = logging.getLogger(__name__)


class PredictionService:
    """Forwards completed form values to the prediction service"""

    def __init__(self, client: Optional[PredictionClient] = None):
        self.client = client or PredictionClient()

    def predict(self, request: PredictionRequest) -> PredictionResponse:
        """Proxy the request and wrap the returned label"""
        payload = request.model_dump()
        logger.info(f"Requesting prediction: {payload}")
        prediction = self.client.predict(payload)
        logger.info(f"Prediction received: {prediction}")
        return PredictionResponse(prediction=prediction)
