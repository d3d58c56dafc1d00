"""
Structured field extraction from raw OCR text

    raw text -> normalize_text -> per-field pattern -> numeric coercion -> result

Every field is evaluated independently; a field whose label is missing or
whose number cannot be parsed is simply left out of the result.
"""
import logging
import re
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple, Union

from domains.field_specs import FIELD_SPECS, FieldSpec
from domains.normalizer import normalize_text

logger = logging.getLogger(__name__)

Number = Union[int, float]

_SEPARATOR = r"\s*[:=\-]?\s*"
# any run of digits and points; its shape is checked after the first match
_CANDIDATE = r"[\d.]+"
# a trailing "." after a whole number cannot be a decimal point
_INTEGER_SHAPE = re.compile(r"(?P<number>\d+)\.?")
# a trailing "." is sentence punctuation only once a fraction is present
_DECIMAL_SHAPE = re.compile(r"(?P<number>\d+)|(?P<fraction>\d+\.\d+)\.?")


@lru_cache(maxsize=None)
def build_pattern(spec: FieldSpec) -> re.Pattern:
    """
    Compile the recognizer for one field

    The label words match case-insensitively with one or more whitespace
    characters between them, followed by an optional ``:``, ``=`` or ``-``
    separator and a run of digits and points captured as ``value``. Whether
    that run is a valid number is decided by ``parse_literal``.
    """
    label = r"\s+".join(re.escape(word) for word in spec.label.split())
    return re.compile(
        rf"(?<![A-Za-z])(?P<label>{label}){_SEPARATOR}(?P<value>{_CANDIDATE})",
        re.IGNORECASE,
    )


def find_first_match(spec: FieldSpec, text: str) -> Optional[re.Match]:
    """Leftmost occurrence of the field in ``text``; later ones are ignored"""
    return build_pattern(spec).search(text)


def parse_literal(spec: FieldSpec, literal: str) -> Optional[str]:
    """
    Check a matched literal against the field's numeric shape

    Returns:
        the number without sentence punctuation, or None if malformed
        ("148." and "1.2.3" for decimal fields, "33.5" for integer fields)
    """
    shape = _INTEGER_SHAPE if spec.integer else _DECIMAL_SHAPE
    match = shape.fullmatch(literal)
    if match is None:
        return None
    return match.group("number") or match.group("fraction")


def coerce_value(spec: FieldSpec, literal: str) -> Number:
    """
    Convert a validated literal to the field's numeric type

    Raises:
        ValueError: if the literal is not a valid number of that type
    """
    if spec.integer:
        return int(literal)
    return float(literal)


def _resolve_conflicts(
    matches: List[Tuple[FieldSpec, re.Match]]
) -> List[Tuple[FieldSpec, re.Match]]:
    """Keep only the highest priority field for each label span"""
    winners: Dict[Tuple[int, int], Tuple[FieldSpec, re.Match]] = {}
    for spec, match in matches:
        span = match.span("label")
        current = winners.get(span)
        if current is None or spec.priority < current[0].priority:
            winners[span] = (spec, match)
        if current is not None:
            logger.debug(
                f"Label span {span} matched by both {current[0].name} and {spec.name}")

    kept = {id(match) for _, match in winners.values()}
    return [(spec, match) for spec, match in matches if id(match) in kept]


def extract_fields(
    raw_text: str,
    specs: Iterable[FieldSpec] = FIELD_SPECS,
) -> Dict[str, Number]:
    """
    Recover field values from raw OCR text

    Only the first labelled number of each field is considered. If it is
    malformed the field is absent; later occurrences are not tried.

    Args:
        raw_text: OCR output, possibly empty or multi-line
        specs: field table to evaluate

    Returns:
        dict: canonical field name -> int or float, only for fields found
    """
    specs = tuple(specs)
    text = normalize_text(raw_text or "", specs)
    if not text.strip():
        logger.info("Normalized text is empty, nothing to extract")
        return {}

    matches = []
    for spec in specs:
        match = find_first_match(spec, text)
        if match is not None:
            matches.append((spec, match))

    extracted: Dict[str, Number] = {}
    for spec, match in _resolve_conflicts(matches):
        literal = match.group("value")
        number = parse_literal(spec, literal)
        if number is None:
            logger.info(f"Field {spec.name} has malformed number '{literal}'")
            continue
        try:
            extracted[spec.name] = coerce_value(spec, number)
        except ValueError as e:
            logger.warning(f"Dropping field {spec.name}: cannot parse '{number}': {str(e)}")

    logger.debug(f"Extracted {len(extracted)}/{len(specs)} fields: {extracted}")
    return extracted
