import logging
from typing import Any, Dict, Optional

from domains.extraction_engine import extract_fields
from domains.ocr_engine import ensure_ocr_available, perform_ocr
from utils import load_image

logger = logging.getLogger(__name__)


class ExtractionService:
    """Runs OCR on an uploaded form and extracts its numeric fields"""

    def extract_from_upload(self, filename: Optional[str], image_data: bytes) -> Dict[str, Any]:
        """
        Extract form fields from an uploaded image

        Args:
            filename: original name of the upload, used for logging only
            image_data: raw image bytes

        Returns:
            dict: {"extracted": {field name: value, ...}}

        Raises:
            InvalidImageError: the upload is empty or not an image
            OcrEngineError: Tesseract is missing or failed
        """
        logger.info(f"Received file: {filename}, size: {len(image_data)} bytes")

        image = load_image(image_data)

        version = ensure_ocr_available()
        logger.info(f"Using Tesseract {version}")

        ocr_text = perform_ocr(image)
        logger.debug(f"OCR output:\n{ocr_text}")

        if not ocr_text:
            logger.info("OCR output is empty")
            return {"extracted": {}}

        extracted = extract_fields(ocr_text)
        logger.info(f"Extracted data: {extracted}")
        return {"extracted": extracted}
