from config import settings
import logging

import pytesseract
from PIL import Image

logger = logging.getLogger(__name__)


class OcrEngineError(RuntimeError):
    """Tesseract is missing or failed to process the image"""


def _configure_tesseract():
    if settings.TESSERACT_CMD:
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD


def ensure_ocr_available() -> str:
    """Return the Tesseract version, or raise OcrEngineError if it cannot run"""
    _configure_tesseract()
    try:
        version = pytesseract.get_tesseract_version()
    except pytesseract.TesseractNotFoundError as e:
        logger.error(f"Tesseract not found: {str(e)}")
        raise OcrEngineError(
            f"Tesseract not installed or not in PATH: {str(e)}") from e
    return str(version)


def perform_ocr(image: Image.Image) -> str:
    """
    Run Tesseract on a decoded image and return its text output

    pytesseract writes the input and output of each call to its own uniquely
    named temporary files, so concurrent requests never share them.

    Raises:
        OcrEngineError: if the binary is missing or exits with an error
    """
    _configure_tesseract()
    try:
        logger.info(f"Running Tesseract (lang={settings.OCR_LANGUAGE}) on {image.size[0]}x{image.size[1]}px image")
        text = pytesseract.image_to_string(image, lang=settings.OCR_LANGUAGE)
    except pytesseract.TesseractNotFoundError as e:
        logger.error(f"Tesseract not found: {str(e)}")
        raise OcrEngineError(
            f"Tesseract not installed or not in PATH: {str(e)}") from e
    except (pytesseract.TesseractError, OSError) as e:
        logger.error(f"Tesseract execution failed: {str(e)}")
        raise OcrEngineError(f"OCR failed: {str(e)}") from e

    text = text.strip()
    logger.info(f"OCR finished: {len(text)} characters")
    return text
