"""
Shared helper functions
"""
import logging
from io import BytesIO
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class InvalidImageError(ValueError):
    """The uploaded bytes are empty or not a readable image"""


def load_image(image_data: bytes) -> Image.Image:
    """
    Decode an uploaded image

    - Empty uploads are rejected
    - The file is verified first, then reopened for reading since
      ``Image.verify`` leaves the image unusable
    """
    if not image_data:
        raise InvalidImageError("Uploaded image is empty")

    try:
        Image.open(BytesIO(image_data)).verify()
        img = Image.open(BytesIO(image_data))
        img.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Unreadable image upload: {str(e)}")
        raise InvalidImageError(f"Uploaded file is not a readable image: {str(e)}") from e

    width, height = img.size
    logger.info(f"Decoded image: {img.format} {width}x{height}px")
    return img
