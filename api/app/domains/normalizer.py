"""
OCR label normalization

Rewrites known label variants (run-together words, abbreviations) to the
canonical label of their field so the recognizers only need to match one form.
"""
import re
from typing import Dict, Iterable, List, Optional, Tuple

from domains.field_specs import FIELD_SPECS, FieldSpec


def _overlaps(left: str, right: str) -> bool:
    """True if a proper suffix of ``left`` is a prefix of ``right``"""
    for size in range(1, min(len(left), len(right))):
        if left[-size:] == right[:size]:
            return True
    return False


def _shares_edge_words(left: List[str], right: List[str]) -> bool:
    """True if the last words of ``left`` are the first words of ``right``"""
    for size in range(1, min(len(left), len(right)) + 1):
        if left[-size:] == right[:size]:
            return True
    return False


def validate_aliases(specs: Iterable[FieldSpec]) -> None:
    """
    Check that alias substitution is order independent and idempotent

    Aliases only match as whole words, so a rewrite can only create a new
    alias occurrence out of the words of a canonical label. Rejecting aliases
    that share words with the start or end of a label rules that out.

    Raises:
        ValueError: if an alias is empty, contains or overlaps another alias,
            occurs inside a canonical label, or begins or ends with the
            trailing or leading words of a canonical label
    """
    specs = list(specs)
    aliases: List[Tuple[str, str]] = []
    for spec in specs:
        for alias in spec.aliases:
            if not alias.strip():
                raise ValueError(f"Empty alias for field {spec.name}")
            aliases.append((alias.lower(), spec.name))

    for i, (alias, owner) in enumerate(aliases):
        for other, other_owner in aliases[i + 1:]:
            if alias in other or other in alias:
                raise ValueError(
                    f"Alias '{alias}' ({owner}) and '{other}' ({other_owner}) contain one another")
            if _overlaps(alias, other) or _overlaps(other, alias):
                raise ValueError(
                    f"Alias '{alias}' ({owner}) overlaps '{other}' ({other_owner})")

        alias_words = alias.split()
        for spec in specs:
            label = spec.label.lower()
            if alias in label:
                raise ValueError(
                    f"Alias '{alias}' ({owner}) occurs inside label '{spec.label}'")
            label_words = label.split()
            if (_shares_edge_words(label_words, alias_words)
                    or _shares_edge_words(alias_words, label_words)):
                raise ValueError(
                    f"Alias '{alias}' ({owner}) shares words with the edge of label '{spec.label}'")


def _alias_pattern(specs: Iterable[FieldSpec]) -> Tuple[Optional[re.Pattern], Dict[str, str]]:
    """One alternation over every alias, longest first, matched as whole words"""
    labels = {
        alias.lower(): spec.label
        for spec in specs
        for alias in spec.aliases
    }
    if not labels:
        return None, labels
    alternatives = "|".join(
        re.escape(alias) for alias in sorted(labels, key=len, reverse=True))
    pattern = re.compile(rf"(?<![A-Za-z])(?:{alternatives})(?![A-Za-z])", re.IGNORECASE)
    return pattern, labels


validate_aliases(FIELD_SPECS)
_DEFAULT_PATTERN = _alias_pattern(FIELD_SPECS)


def normalize_text(text: str, specs: Tuple[FieldSpec, ...] = FIELD_SPECS) -> str:
    """Replace every alias in ``text`` with its field's canonical label"""
    if not text:
        return text

    pattern, labels = _DEFAULT_PATTERN if specs is FIELD_SPECS else _alias_pattern(specs)
    if pattern is None:
        return text
    return pattern.sub(lambda match: labels[match.group(0).lower()], text)
