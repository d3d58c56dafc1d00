"""
Tests for the field extraction engine.
"""

import logging

import pytest

from domains import extraction_engine
from domains.extraction_engine import (
    coerce_value,
    extract_fields,
    find_first_match,
    parse_literal,
)
from domains.field_specs import FIELD_NAMES, FIELD_SPECS, FieldSpec


class TestCanonicalLabels:
    """Each field is recognized under its canonical label."""

    @pytest.mark.parametrize("spec", FIELD_SPECS, ids=lambda spec: spec.name)
    def test_single_field(self, spec):
        """Label, separator and number yield exactly that field."""
        result = extract_fields(f"{spec.label}: 42")

        assert result == {spec.name: 42}
        assert isinstance(result[spec.name], int if spec.integer else float)

    def test_documented_example(self):
        """Mixed separators on one line."""
        result = extract_fields("Glucose: 148, Age-33, BMI 33.6")

        assert result == {"Glucose": 148.0, "Age": 33, "BMI": 33.6}
        assert isinstance(result["Glucose"], float)
        assert isinstance(result["Age"], int)

    def test_full_form(self):
        """A multi-line form with every field."""
        text = (
            "PATIENT INTAKE\n"
            "Pregnancies: 6\n"
            "Glucose = 148\n"
            "Blood Pressure: 72 mmHg\n"
            "Skin Thickness - 35\n"
            "Insulin: 0\n"
            "BMI: 33.6\n"
            "Diabetes Pedigree Function: 0.627\n"
            "Age: 50\n"
        )

        assert extract_fields(text) == {
            "Pregnancies": 6,
            "Glucose": 148.0,
            "BloodPressure": 72.0,
            "SkinThickness": 35.0,
            "Insulin": 0.0,
            "BMI": 33.6,
            "DiabetesPedigreeFunction": 0.627,
            "Age": 50,
        }

    def test_result_keys_come_from_field_table(self):
        """No keys outside the field table are produced."""
        result = extract_fields("Cholesterol: 200\nGlucose: 90\nHeart Rate: 70")

        assert set(result) <= set(FIELD_NAMES)
        assert result == {"Glucose": 90.0}


class TestLabelMatching:
    """Case, whitespace and separator tolerance."""

    def test_case_insensitive(self):
        """Labels match regardless of case."""
        assert extract_fields("GLUCOSE=99 bmi:21.5") == {"Glucose": 99.0, "BMI": 21.5}

    def test_flexible_whitespace_between_label_words(self):
        """Multi-word labels accept any whitespace run, including line breaks."""
        assert extract_fields("Blood \n  Pressure - 80") == {"BloodPressure": 80.0}

    def test_separator_optional(self):
        """The number may directly follow the label."""
        assert extract_fields("Insulin 94") == {"Insulin": 94.0}
        assert extract_fields("Insulin94") == {"Insulin": 94.0}

    def test_only_one_separator(self):
        """Two separators in a row do not match."""
        assert extract_fields("Glucose :: 148") == {}

    def test_label_inside_word_is_ignored(self):
        """'Page 2' is not the Age field."""
        assert extract_fields("Page 2 of 3") == {}


class TestAliases:
    """Alias spellings behave like canonical labels."""

    def test_run_together_labels(self):
        """Run-together spellings are recognized."""
        result = extract_fields("BloodPressure=72 SkinThickness=35")

        assert result == {"BloodPressure": 72.0, "SkinThickness": 35.0}

    @pytest.mark.parametrize("alias_text, canonical_text", [
        ("BloodPressure: 72", "Blood Pressure: 72"),
        ("skinthickness 35", "Skin Thickness 35"),
        ("DPF: 0.627", "Diabetes Pedigree Function: 0.627"),
        ("dpf=0.5", "Diabetes Pedigree Function=0.5"),
        ("DiabetesPedigreeFunction-1.2", "Diabetes Pedigree Function-1.2"),
    ])
    def test_alias_matches_canonical(self, alias_text, canonical_text):
        """An alias gives the same result as the canonical spelling."""
        assert extract_fields(alias_text) == extract_fields(canonical_text)
        assert extract_fields(alias_text) != {}


class TestResolution:
    """First-match-wins and malformed numbers."""

    def test_no_labels(self):
        """Text without labels is an empty result, not an error."""
        assert extract_fields("The quick brown fox jumps over the lazy dog") == {}

    def test_empty_text(self):
        """Empty input is an empty result."""
        assert extract_fields("") == {}

    def test_first_occurrence_wins(self):
        """Only the first occurrence of a label is used."""
        assert extract_fields("Glucose: 148\nGlucose: 200") == {"Glucose": 148.0}

    def test_first_occurrence_wins_for_alias_and_canonical(self):
        """An alias earlier in the text wins over a later canonical label."""
        assert extract_fields("BloodPressure 70 ... Blood Pressure 90") == {"BloodPressure": 70.0}

    @pytest.mark.parametrize("text", [
        "Glucose: 148.",
        "BMI: .",
        "BMI: .5",
        "Glucose: 1.2.3",
    ])
    def test_malformed_number_is_absent(self, text):
        """A number with a dangling decimal point is not extracted."""
        assert extract_fields(text) == {}

    def test_integer_field_rejects_decimal(self):
        """Integer-only fields do not accept a fractional part."""
        assert extract_fields("Age: 33.5") == {}
        assert extract_fields("Pregnancies: 2.0") == {}

    def test_malformed_first_occurrence_is_not_skipped(self):
        """A malformed first value leaves the field absent instead of using a later one."""
        assert extract_fields("Glucose: 148. Glucose: 200") == {}
        assert extract_fields("BMI: . then BMI: 30.1") == {}

    def test_sentence_punctuation_after_number(self):
        """A full stop after a complete number ends the sentence, not the number."""
        assert extract_fields("Age: 33. BMI: 28.1.") == {"Age": 33, "BMI": 28.1}
        assert extract_fields("Insulin: 94.5.\nPregnancies: 2.") == {"Insulin": 94.5, "Pregnancies": 2}

    @pytest.mark.parametrize("spec, literal, expected", [
        (FieldSpec("Age", "Age", integer=True), "33", "33"),
        (FieldSpec("Age", "Age", integer=True), "33.", "33"),
        (FieldSpec("Age", "Age", integer=True), "33.5", None),
        (FieldSpec("BMI", "BMI"), "148", "148"),
        (FieldSpec("BMI", "BMI"), "33.6", "33.6"),
        (FieldSpec("BMI", "BMI"), "33.6.", "33.6"),
        (FieldSpec("BMI", "BMI"), "148.", None),
        (FieldSpec("BMI", "BMI"), ".5", None),
        (FieldSpec("BMI", "BMI"), "1.2.3", None),
    ])
    def test_parse_literal(self, spec, literal, expected):
        """Literals are checked against the field's numeric shape."""
        assert parse_literal(spec, literal) == expected

    def test_find_first_match_returns_leftmost(self):
        """The matched span is the leftmost occurrence."""
        spec = FIELD_SPECS[FIELD_NAMES.index("Age")]
        text = "Age: 30, Age: 40"

        match = find_first_match(spec, text)

        assert match.group("value") == "30"
        assert match.start() == 0

    def test_priority_breaks_ties_on_same_label(self):
        """Two fields matching the same label span keep only the higher priority one."""
        specs = (
            FieldSpec("SugarLow", "Sugar", priority=5),
            FieldSpec("SugarHigh", "Sugar", priority=1),
            FieldSpec("Weight", "Weight", priority=2),
        )

        assert extract_fields("Sugar: 5.5 Weight: 70", specs) == {"SugarHigh": 5.5, "Weight": 70.0}


class TestCoercion:
    """Numeric coercion and per-field failure isolation."""

    def test_integer_coercion(self):
        """Integer fields produce int."""
        spec = FieldSpec("Age", "Age", integer=True)
        assert coerce_value(spec, "33") == 33
        assert isinstance(coerce_value(spec, "33"), int)

    def test_decimal_coercion(self):
        """Decimal fields produce float."""
        spec = FieldSpec("BMI", "BMI")
        assert coerce_value(spec, "33.6") == 33.6
        assert isinstance(coerce_value(spec, "148"), float)

    def test_invalid_literal_raises(self):
        """A non-numeric literal raises ValueError."""
        with pytest.raises(ValueError):
            coerce_value(FieldSpec("Age", "Age", integer=True), "3x")

    def test_parse_failure_drops_only_that_field(self, monkeypatch, caplog):
        """A coercion failure removes one field and is logged."""
        original = extraction_engine.coerce_value

        def failing_coerce(spec, literal):
            if spec.name == "Glucose":
                raise ValueError("inconsistent literal")
            return original(spec, literal)

        monkeypatch.setattr(extraction_engine, "coerce_value", failing_coerce)

        with caplog.at_level(logging.WARNING, logger="domains.extraction_engine"):
            result = extract_fields("Glucose: 148, Age-33, BMI 33.6")

        assert result == {"Age": 33, "BMI": 33.6}
        assert "Dropping field Glucose" in caplog.text

    def test_blank_text_skips_pattern_evaluation(self, monkeypatch):
        """Whitespace-only text returns before any recognizer runs."""
        def unexpected(spec, text):
            raise AssertionError("recognizer should not run")

        monkeypatch.setattr(extraction_engine, "find_first_match", unexpected)

        assert extract_fields("   \n\t ") == {}

    def test_summary_logged_at_debug(self, caplog):
        """The per-call summary stays out of INFO logs; the service logs the request."""
        with caplog.at_level(logging.INFO, logger="domains.extraction_engine"):
            extract_fields("Glucose: 148")

        assert not [record for record in caplog.records if "Extracted" in record.getMessage()]

        caplog.clear()
        with caplog.at_level(logging.DEBUG, logger="domains.extraction_engine"):
            extract_fields("Glucose: 148")

        assert any("Extracted 1/8 fields" in record.getMessage() for record in caplog.records)
