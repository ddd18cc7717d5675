"""
Test suite for the tolerant attribution response parser.

Tests fence stripping, prose tolerance, truncation repair, shape validation,
and defaulting of omitted statement fields.

System role: Verification of model output recovery
"""

import json

import pytest

from backend.core.attribution.response_parser import (
    extract_json_object,
    parse_attribution_response,
    repair_truncated_json,
    strip_code_fences,
)
from backend.core.exceptions import (
    EmptyGenerationError,
    InvalidAttributionShapeError,
    LLMProviderError,
    ParseFailureError,
)
from backend.models.attribution import AttributionType


TRUNCATED_IN_STATEMENTS = (
    '{"sections":[{"section":"Goals","statements":['
    '{"statement":"Maintain K+ < 5.0","sources":["Patient Record: K+ 5.1"],'
    '"attribution_type":"mixed"},'
    '{"statement":"Reduce BP","sour'
)


class TestStripCodeFences:
    """Test suite for strip_code_fences()."""

    def test_json_fence_should_be_removed(self) -> None:
        """Test ```json opener and ``` closer are both removed."""
        assert strip_code_fences('```json\n{"a": 1}\n```').strip() == '{"a": 1}'

    def test_bare_fence_should_be_removed(self) -> None:
        """Test language-less fences are removed."""
        assert strip_code_fences('```\n{"a": 1}\n```').strip() == '{"a": 1}'


class TestParseAttributionResponse:
    """Test suite for parse_attribution_response()."""

    def test_plain_json_should_parse_sections_in_order(self, sample_attribution_json: str) -> None:
        """Test well-formed output projects into ordered sections."""
        # Act
        sections = parse_attribution_response(sample_attribution_json)

        # Assert
        assert [s.section_name for s in sections] == ["Problem List / DTPs", "SMART Goals"]
        first = sections[0].statements[0]
        assert first.statement_text.startswith("Risk of hyperkalemia")
        assert first.attribution_type == AttributionType.MIXED
        assert len(first.sources) == 2

    def test_fenced_json_with_prose_should_parse(self, sample_attribution_json: str) -> None:
        """Test fences and surrounding commentary are tolerated."""
        # Arrange
        raw = (
            "Here is the attribution you asked for:\n```json\n"
            f"{sample_attribution_json}\n```\nLet me know if you need changes."
        )

        # Act
        sections = parse_attribution_response(raw)

        # Assert
        assert len(sections) == 2

    def test_trailing_prose_with_braces_should_be_ignored(self) -> None:
        """Test text after the outer object is discarded even if it contains braces."""
        raw = '{"sections": []}\nNote: use {curly} placeholders carefully.'

        assert parse_attribution_response(raw) == []

    def test_braces_inside_strings_should_not_confuse_extraction(self) -> None:
        """Test string contents are not counted as structure."""
        # Arrange
        raw = json.dumps({
            "sections": [{
                "section": "Plan {draft}",
                "statements": [{"statement": "Dose } adjust", "sources": ["a]b"]}],
            }]
        })

        # Act
        sections = parse_attribution_response(raw)

        # Assert
        assert sections[0].section_name == "Plan {draft}"
        assert sections[0].statements[0].statement_text == "Dose } adjust"

    def test_truncated_output_should_keep_complete_statements(self) -> None:
        """Test truncation inside a statements array recovers earlier statements."""
        # Act
        sections = parse_attribution_response(TRUNCATED_IN_STATEMENTS)

        # Assert
        assert len(sections) == 1
        assert sections[0].section_name == "Goals"
        assert [s.statement_text for s in sections[0].statements] == ["Maintain K+ < 5.0"]

    def test_omitted_fields_should_default(self) -> None:
        """Test missing attribution_type and sources receive defaults."""
        # Arrange
        raw = '{"sections": [{"section": "Monitoring", "statements": [{"statement": "Check BMP in 1 week"}]}]}'

        # Act
        statement = parse_attribution_response(raw)[0].statements[0]

        # Assert
        assert statement.attribution_type == AttributionType.CLINICAL_REASONING
        assert statement.sources == []

    def test_omitted_statements_should_default_to_empty(self) -> None:
        """Test a section without statements yields an empty list."""
        sections = parse_attribution_response('{"sections": [{"section": "Education"}]}')

        assert sections[0].statements == []

    def test_empty_sections_should_parse_to_empty_list(self) -> None:
        """Test an empty sections array is valid."""
        assert parse_attribution_response('{"sections": []}') == []

    @pytest.mark.parametrize("raw", ["", "   \n\t ", None])
    def test_blank_output_should_raise_empty_generation(self, raw) -> None:
        """Test blank output is a provider-level empty generation."""
        with pytest.raises(EmptyGenerationError) as exc_info:
            parse_attribution_response(raw)

        assert isinstance(exc_info.value, LLMProviderError)

    def test_output_without_object_should_raise_parse_failure(self) -> None:
        """Test prose without any JSON object fails."""
        with pytest.raises(ParseFailureError):
            parse_attribution_response("I am unable to produce an attribution for this plan.")

    def test_missing_sections_should_raise_invalid_shape(self) -> None:
        """Test object without sections array is rejected."""
        with pytest.raises(InvalidAttributionShapeError):
            parse_attribution_response('{"result": "ok"}')

    def test_sections_not_a_list_should_raise_invalid_shape(self) -> None:
        """Test sections of the wrong type is rejected."""
        with pytest.raises(InvalidAttributionShapeError):
            parse_attribution_response('{"sections": {"section": "A"}}')

    def test_unknown_attribution_type_should_raise_invalid_shape(self) -> None:
        """Test attribution types outside the fixed set are rejected."""
        raw = '{"sections": [{"section": "A", "statements": [{"statement": "s", "attribution_type": "guess"}]}]}'

        with pytest.raises(InvalidAttributionShapeError):
            parse_attribution_response(raw)

    def test_section_without_name_should_raise_invalid_shape(self) -> None:
        """Test sections must carry a section label."""
        with pytest.raises(InvalidAttributionShapeError):
            parse_attribution_response('{"sections": [{"statements": []}]}')

    def test_deeply_nested_json_should_raise_parse_failure(self) -> None:
        """Test nesting beyond the decoder's recursion limit is a parse failure."""
        raw = '{"sections": ' + "[" * 5000 + "]" * 5000 + "}"

        with pytest.raises(ParseFailureError):
            parse_attribution_response(raw)

    def test_invalid_shape_should_be_a_parse_failure(self) -> None:
        """Test shape errors share the parse failure base class."""
        assert issubclass(InvalidAttributionShapeError, ParseFailureError)


class TestRepairTruncatedJson:
    """Test suite for repair_truncated_json()."""

    def test_cut_inside_statements_should_append_canonical_closers(self) -> None:
        """Test cut at last brace closes statements, section, sections, root."""
        # Act
        repaired = repair_truncated_json(TRUNCATED_IN_STATEMENTS)

        # Assert
        assert repaired.endswith('"attribution_type":"mixed"}]}]}')
        assert json.loads(repaired)["sections"][0]["section"] == "Goals"

    def test_no_complete_brace_should_raise(self) -> None:
        """Test output truncated before any object closes cannot be repaired."""
        with pytest.raises(ParseFailureError):
            repair_truncated_json('{"sections": [{"section": "Go')

    def test_brace_inside_truncated_string_should_step_back_to_previous_brace(self) -> None:
        """Test a cut inside a string keeps the statements completed before it."""
        # Arrange
        raw = (
            '{"sections":[{"section":"Goals","statements":['
            '{"statement":"Maintain K+ < 5.0","sources":[]},'
            '{"statement":"Target {K+}'
        )

        # Act
        repaired = repair_truncated_json(raw)

        # Assert
        assert repaired.endswith('"sources":[]}]}]}')
        statements = json.loads(repaired)["sections"][0]["statements"]
        assert [s["statement"] for s in statements] == ["Maintain K+ < 5.0"]

    def test_cut_inside_string_should_raise(self) -> None:
        """Test a cut with no brace outside a string value fails explicitly."""
        with pytest.raises(ParseFailureError):
            repair_truncated_json('{"sections": [{"section": "Plan {A}')

    def test_truncated_spans_without_recoverable_object_should_fail_parse(self) -> None:
        """Test truncation before the first statement closes is reported as a failure."""
        raw = '```json\n{"sections":[{"section":"Problem List","statements":[{"statement":"Risk of'

        with pytest.raises(ParseFailureError):
            parse_attribution_response(raw)


class TestExtractJsonObject:
    """Test suite for extract_json_object()."""

    def test_complete_object_should_be_isolated(self) -> None:
        """Test leading and trailing prose is cut away."""
        assert extract_json_object('Result: {"a": [1, 2]} done') == '{"a": [1, 2]}'

    def test_mismatched_brackets_should_raise(self) -> None:
        """Test structurally broken JSON is reported."""
        with pytest.raises(ParseFailureError):
            extract_json_object('{"a": [1, 2}')
