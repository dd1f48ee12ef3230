"""Carbon quiz validation, prompt building and Gemini response parsing."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from carbon_quiz import (
    FIELDS,
    SECTIONS,
    AnalysisError,
    CarbonAnalysis,
    CarbonEstimator,
    QuizValidationError,
    build_prompt,
    missing_required,
    parse_analysis,
    validate_answers,
)


def complete_answers() -> dict:
    answers = {}
    for name, field in FIELDS.items():
        if field["type"] == "radio":
            answers[name] = field["options"][0]
        else:
            answers[name] = "one bicycle"
    return answers


ANALYSIS = {
    "totalCO2Lifetime": 250.5,
    "percentAboveAverage": -16.5,
    "topContributors": ["Flights", "Diet"],
    "recommendations": ["Fly less", "Eat less beef", "Switch to a green tariff"],
}


class TestMissingRequired:
    def test_reports_required_labels(self):
        missing = missing_required(0, {"age_range": "18-30 years"})
        assert "What is your approximate age range?" not in missing
        assert "What is your gender?" not in missing  # optional
        assert "In which region are you currently residing?" in missing

    def test_blank_strings_count_as_missing(self):
        missing = missing_required(2, {"number_and_types_of_vehicles": "   "})
        assert "Describe the number and types of vehicles you own?" in missing

    def test_unknown_section(self):
        with pytest.raises(IndexError):
            missing_required(len(SECTIONS), {})


class TestValidateAnswers:
    def test_complete_answers_pass(self):
        answers = complete_answers()
        assert validate_answers(answers) == answers

    def test_strips_and_drops_unknown_fields(self):
        answers = complete_answers()
        answers["number_and_types_of_vehicles"] = "  two cars  "
        answers["favourite_colour"] = "green"
        cleaned = validate_answers(answers)
        assert cleaned["number_and_types_of_vehicles"] == "two cars"
        assert "favourite_colour" not in cleaned

    def test_missing_and_invalid_are_reported_together(self):
        answers = complete_answers()
        del answers["diet_type"]
        answers["age_range"] = "ancient"
        with pytest.raises(QuizValidationError) as exc:
            validate_answers(answers)
        assert exc.value.missing == ["What best describes your diet?"]
        assert exc.value.invalid == ["What is your approximate age range?"]

    def test_rejects_non_dict(self):
        with pytest.raises(QuizValidationError):
            validate_answers(["not", "a", "dict"])


class TestBuildPrompt:
    def test_contains_answers_and_reply_shape(self):
        prompt = build_prompt({"diet_type": "Vegan (no animal products)"})
        assert '"diet_type": "Vegan (no animal products)"' in prompt
        for key in ANALYSIS:
            assert key in prompt


class TestParseAnalysis:
    def test_plain_json(self):
        result = parse_analysis(json.dumps(ANALYSIS))
        assert result == CarbonAnalysis(
            total_co2_lifetime=250.5,
            percent_above_average=-16.5,
            top_contributors=["Flights", "Diet"],
            recommendations=["Fly less", "Eat less beef", "Switch to a green tariff"],
        )
        assert result.to_dict() == ANALYSIS

    def test_integers_are_accepted(self):
        data = dict(ANALYSIS, totalCO2Lifetime=310)
        assert parse_analysis(json.dumps(data)).total_co2_lifetime == 310.0

    def test_is_frozen(self):
        result = parse_analysis(json.dumps(ANALYSIS))
        with pytest.raises(ValidationError):
            result.total_co2_lifetime = 1.0

    @pytest.mark.parametrize("text", [
        None,
        "",
        "The footprint is about 300 tonnes.",
        "[1, 2]",
        json.dumps(dict(ANALYSIS, topContributors=["Flights"])),
        json.dumps(dict(ANALYSIS, recommendations="Fly less")),
        json.dumps({k: v for k, v in ANALYSIS.items() if k != "percentAboveAverage"}),
        json.dumps(dict(ANALYSIS, totalCO2Lifetime="lots")),
        json.dumps(dict(ANALYSIS, totalCO2Lifetime="310")),
        json.dumps(dict(ANALYSIS, totalCO2Lifetime=True)),
        json.dumps(dict(ANALYSIS, topContributors=[None, {}])),
        json.dumps(dict(ANALYSIS, recommendations=[1, 2, 3])),
        json.dumps(dict(ANALYSIS, recommendations=["a", "b", "c", "d"])),
    ])
    def test_malformed(self, text):
        with pytest.raises(AnalysisError):
            parse_analysis(text)


class TestCarbonEstimator:
    def test_requires_api_key(self):
        with pytest.raises(AnalysisError):
            CarbonEstimator(api_key=None)

    def test_analyze_calls_model(self):
        client = MagicMock()
        client.models.generate_content.return_value = MagicMock(text=json.dumps(ANALYSIS))
        estimator = CarbonEstimator(client=client, model="gemini-test")

        result = estimator.analyze({"diet_type": "Vegan (no animal products)"})

        assert result.top_contributors == ["Flights", "Diet"]
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["config"].response_schema is CarbonAnalysis
        assert "Vegan" in kwargs["contents"]

    def test_api_failure_becomes_analysis_error(self):
        client = MagicMock()
        client.models.generate_content.side_effect = RuntimeError("quota exceeded")
        estimator = CarbonEstimator(client=client)
        with pytest.raises(AnalysisError, match="quota exceeded"):
            estimator.analyze({})
