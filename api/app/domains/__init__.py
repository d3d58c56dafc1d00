"""
Domain logic layer - Pure business logic
"""
from .field_specs import FieldSpec, FIELD_SPECS, FIELD_NAMES
from .normalizer import normalize_text, validate_aliases
from .extraction_engine import (
    build_pattern,
    find_first_match,
    parse_literal,
    coerce_value,
    extract_fields,
)
from .ocr_engine import (
    OcrEngineError,
    ensure_ocr_available,
    perform_ocr,
)

__all__ = [
    # Fields
    "FieldSpec",
    "FIELD_SPECS",
    "FIELD_NAMES",
    # Normalization
    "normalize_text",
    "validate_aliases",
    # Extraction
    "build_pattern",
    "find_first_match",
    "parse_literal",
    "coerce_value",
    "extract_fields",
    # OCR
    "OcrEngineError",
    "ensure_ocr_available",
    "perform_ocr",
]
