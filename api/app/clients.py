"""
Outbound HTTP clients
"""
import logging
import requests
from config import settings

logger = logging.getLogger(__name__)


class PredictionServiceError(RuntimeError):
    """The prediction service could not be reached or returned an error"""


def create_http_session():
    """
    Create the shared requests session for outbound calls
    """
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    return session


# Global session instance
http_session = create_http_session()


class PredictionClient:
    """Client for the remote prediction endpoint"""

    def __init__(self, session=None, url=None, timeout=None):
        self.session = session or http_session
        self.url = url or settings.PREDICTION_API_URL
        self.timeout = timeout or settings.PREDICTION_TIMEOUT

    def predict(self, payload: dict) -> str:
        """Send the form values and return the prediction label

        Args:
            payload: the eight form fields keyed by their JSON names

        Returns:
            Prediction label

        Raises:
            PredictionServiceError: on connection failure, non-200 status or
                a response without a prediction
        """
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Error connecting to ML server: {e}")
            raise PredictionServiceError(f"Failed to connect to ML server: {str(e)}") from e

        if response.status_code != 200:
            logger.error(
                f"ML server returned non-200 status: {response.status_code}, body: {response.text}")
            raise PredictionServiceError(f"ML server error: status {response.status_code}")

        return self._parse_response(response)

    def _parse_response(self, response) -> str:
        """Extract the prediction label from the response body"""
        try:
            response_data = response.json()
        except ValueError as e:
            logger.error(f"ML server returned invalid JSON: {response.text}")
            raise PredictionServiceError("ML server returned an invalid response") from e

        prediction = response_data.get("prediction") if isinstance(response_data, dict) else None
        if not isinstance(prediction, str):
            logger.error(f"ML server response has no prediction: {response_data}")
            raise PredictionServiceError("ML server returned no prediction")
        return prediction
