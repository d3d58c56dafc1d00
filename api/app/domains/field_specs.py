"""
Extractable form field table
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldSpec:
    """One extractable form field.

    Attributes:
        name: canonical key used in the extraction result
        label: canonical label phrase, words separated by single spaces
        aliases: alternate spellings rewritten to ``label`` before matching
        integer: True if only whole numbers are accepted
        priority: tie-break when two fields match the same label span (lower wins)
    """
    name: str
    label: str
    aliases: Tuple[str, ...] = ()
    integer: bool = False
    priority: int = 0


FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("Pregnancies", "Pregnancies", integer=True, priority=0),
    FieldSpec("Glucose", "Glucose", priority=1),
    FieldSpec("BloodPressure", "Blood Pressure",
              aliases=("BloodPressure",), priority=2),
    FieldSpec("SkinThickness", "Skin Thickness",
              aliases=("SkinThickness",), priority=3),
    FieldSpec("Insulin", "Insulin", priority=4),
    FieldSpec("BMI", "BMI", priority=5),
    FieldSpec("DiabetesPedigreeFunction", "Diabetes Pedigree Function",
              aliases=("DiabetesPedigreeFunction", "DPF"), priority=6),
    FieldSpec("Age", "Age", integer=True, priority=7),
)

FIELD_NAMES: Tuple[str, ...] = tuple(spec.name for spec in FIELD_SPECS)
