from pydantic import BaseModel


class PredictionRequest(BaseModel):
    """Form values forwarded to the prediction service"""
    pregnancies: int
    glucose: float
    bloodPressure: float
    skinThickness: float
    insulin: float
    bmi: float
    diabetesPedigreeFunction: float
    age: int


class PredictionResponse(BaseModel):
    """Prediction service answer"""
    prediction: str
