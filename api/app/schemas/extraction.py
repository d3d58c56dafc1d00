from pydantic import BaseModel
from typing import Dict, Union


class ExtractionResponse(BaseModel):
    """Fields recognized on an uploaded form, keyed by canonical field name"""
    extracted: Dict[str, Union[int, float]]
