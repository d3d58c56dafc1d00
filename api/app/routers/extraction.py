from fastapi import APIRouter, HTTPException, UploadFile, File
from typing import Optional
import logging

from schemas import ExtractionResponse
from services.extraction_service import ExtractionService
from domains.ocr_engine import OcrEngineError
from utils import InvalidImageError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Extraction"])

extraction_service = ExtractionService()


@router.post("/extract", response_model=ExtractionResponse)
def extract_fields_from_image(image: Optional[UploadFile] = File(None)):
    """Run OCR on an uploaded form image and return the recognized fields"""
    if image is None:
        logger.error("Error getting form file: no image field in request")
        raise HTTPException(status_code=400, detail="No image uploaded")

    try:
        image_data = image.file.read()
        return extraction_service.extract_from_upload(image.filename, image_data)
    except InvalidImageError as e:
        logger.error(f"Invalid image upload: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except OcrEngineError as e:
        logger.error(f"OCR error: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
