import os


class Settings:
    """Application settings"""

    # Server
    PORT: int = int(os.getenv("PORT", "8080"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: list = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Prediction service
    PREDICTION_API_URL: str = os.getenv(
        "PREDICTION_API_URL", "https://smart-disease-predictor-ml.onrender.com/predict")
    PREDICTION_TIMEOUT: float = float(os.getenv("PREDICTION_TIMEOUT", "30"))

    # OCR
    TESSERACT_CMD: str = os.getenv("TESSERACT_CMD", "")
    OCR_LANGUAGE: str = os.getenv("OCR_LANGUAGE", "eng")


# Global settings instance
settings = Settings()
