from fastapi import APIRouter
import logging

from domains.ocr_engine import OcrEngineError, ensure_ocr_available

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])


@router.get("/")
def read_root():
    """Root endpoint - API liveness"""
    return {"message": "Form extraction API is running"}


@router.get("/health")
def health_check():
    """Health check, including whether Tesseract can be found"""
    try:
        ocr_status = f"tesseract {ensure_ocr_available()}"
    except OcrEngineError:
        ocr_status = "unavailable"
    return {"status": "ok", "ocr": ocr_status}
