# carbon_quiz.py
# Lifetime CO2 quiz: question schema, answer validation, and scoring through
# the Gemini API.
from __future__ import annotations

import json
import logging

from google import genai
from google.genai import types
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, ValidationError

logger = logging.getLogger(__name__)

REGIONS = ["North America", "Europe", "Asia", "South America", "Africa", "Oceania"]

SECTIONS = [
    {
        "section": "Personal Details",
        "fields": [
            {"name": "age_range", "label": "What is your approximate age range?",
             "type": "radio", "required": True,
             "options": ["<18 years", "18-30 years", "31-45 years", "46-60 years", ">60 years"]},
            {"name": "country_current_residence",
             "label": "In which region are you currently residing?",
             "type": "radio", "required": True, "options": REGIONS},
            {"name": "country_majority_of_life_lived",
             "label": "In which region have you spent the majority of your life living in?",
             "type": "radio", "required": True, "options": REGIONS},
            {"name": "gender", "label": "What is your gender?",
             "type": "radio", "required": False,
             "options": ["Male", "Female", "Other", "Prefer not to say"]},
            {"name": "occupation_type", "label": "What is your primary occupation type?",
             "type": "radio", "required": True,
             "options": ["Student", "Unemployed/Retired", "Office-based work", "Remote work",
                         "Manual labor/Field work", "Other"]},
        ],
    },
    {
        "section": "Home & Energy",
        "fields": [
            {"name": "home_size_number_of_bedrooms",
             "label": "What is the size of your home (in number of bedrooms)?",
             "type": "radio", "required": False,
             "options": ["1 bedroom (or studio)", "2 bedrooms", "3 bedrooms", "4 bedrooms",
                         "5+ bedrooms"]},
            {"name": "energy_type", "label": "What is your main energy source at home?",
             "type": "radio", "required": True,
             "options": ["Fully Renewable (e.g., own solar)",
                         "Grid (certified green/renewable tariff)",
                         "Grid (standard mix, varies by region)",
                         "Mostly Fossil Fuels (e.g., gas heating, mixed grid)",
                         "Primarily Coal/Oil (e.g., oil heating, coal-heavy grid)"]},
            {"name": "appliance_efficiency",
             "label": "How would you describe the energy efficiency of your appliances?",
             "type": "radio", "required": False,
             "options": ["Most are high-efficiency models", "Some are high-efficiency",
                         "Few are high-efficiency", "Mostly older/standard models"]},
            {"name": "type_of_heating", "label": "What type of heating do you primarily use?",
             "type": "radio", "required": False,
             "options": ["Efficient Electric (Heat Pump)", "Standard Electric (Resistive)",
                         "Natural Gas", "Heating Oil", "Wood/Biomass (sustainable source)",
                         "Wood/Biomass (unknown source)", "No heating / Minimal use"]},
            {"name": "prompts_to_ai_per_day_on_average",
             "label": "How many prompts do you send to AI (e.g., ChatGPT, Gemini) on average per day?",
             "type": "radio", "required": True,
             "options": ["0-10 (Minimal use)", "11-50 (Light use)", "51-100 (Moderate use)",
                         "100+ (Heavy use)"]},
        ],
    },
    {
        "section": "Transportation",
        "fields": [
            {"name": "number_and_types_of_vehicles",
             "label": "Describe the number and types of vehicles you own?",
             "type": "text", "required": True},
            {"name": "average_hours_in_a_car_per_day",
             "label": "On average, how many hours do you spend in a car per day "
                      "(as driver or passenger)?",
             "type": "radio", "required": True,
             "options": ["0 hours (or very rarely)", "Around 30 minutes", "Around 1 hour",
                         "Around 1 hour 30 minutes", "Around 2 hours",
                         "Around 2 hours 30 minutes", "More than 3 hours"]},
            {"name": "average_international_flights_per_year",
             "label": "How many international flights (round trip) do you take on average per year?",
             "type": "radio", "required": True,
             "options": ["None", "1 short-haul (e.g., within your continent)",
                         "1 long-haul (e.g., intercontinental)", "2-3 short-haul",
                         "2-3 long-haul", "More than 3 long-haul"]},
            {"name": "average_domestic_flights_per_year",
             "label": "How many domestic flights (round trip) do you take on average per year?",
             "type": "radio", "required": True,
             "options": ["None", "1 flight", "2 flights", "3 flights", "4 flights",
                         "5-7 flights", "8+ flights"]},
        ],
    },
    {
        "section": "Food",
        "fields": [
            {"name": "diet_type", "label": "What best describes your diet?",
             "type": "radio", "required": True,
             "options": ["Vegan (no animal products)",
                         "Vegetarian (no meat/fish, may include dairy/eggs)",
                         "Pescatarian (vegetarian + fish)",
                         "Omnivore (balanced, eats meat occasionally)",
                         "Meat-heavy (red meat most days)"]},
            {"name": "consumption_of_beef_or_lamb_per_week",
             "label": "How often do you consume beef or lamb per week?",
             "type": "radio", "required": False,
             "options": ["Never/Rarely", "1-2 times a week", "3-4 times a week", "Almost daily"]},
            {"name": "average_percent_of_meal_wasted",
             "label": "On average, what percentage of your purchased food goes to waste?",
             "type": "radio", "required": True,
             "options": ["Very little (0-10%)", "Some (11-25%)", "Moderate (26-40%)",
                         "A lot (Over 40%)"]},
            {"name": "yes_or_no_try_to_reduce_food_waste",
             "label": "Do you actively try to reduce food waste (e.g., meal planning, composting)?",
             "type": "radio", "required": True,
             "options": ["Yes, consistently and effectively", "Yes, sometimes or with some methods",
                         "Not actively, but I'm mindful", "No, not a current focus"]},
        ],
    },
    {
        "section": "Purchases & Other",
        "fields": [
            {"name": "pets_number_and_type", "label": "Describe the pets you have",
             "type": "text", "required": False},
            {"name": "where_investments_go",
             "label": "Do you invest or store money in ethical/green funds or banks?",
             "type": "radio", "required": False,
             "options": ["Yes, primarily or significantly", "Yes, a small portion",
                         "No, but I'm considering it", "No, not aware or not a priority",
                         "I don't have investments/significant savings"]},
            {"name": "clothes_purchased_per_month",
             "label": "On average, how many new clothing items (incl. accessories) do you "
                      "purchase per month?",
             "type": "radio", "required": True,
             "options": ["0-1 (Rarely buy new, focus on second-hand/repair)", "1-2 items",
                         "3-5 items", "More than 5 items"]},
            {"name": "water_usage_per_day",
             "label": "Describe your typical daily water usage (e.g., shower length).",
             "type": "radio", "required": True,
             "options": ["Short showers (under 5 mins), water-saving habits",
                         "Average showers (5-10 mins)",
                         "Long showers (over 10 mins), and/or frequent baths",
                         "Very high water usage (e.g. multiple long showers/baths daily)"]},
        ],
    },
]

FIELDS = {f["name"]: f for s in SECTIONS for f in s["fields"]}

# Reference figures quoted to the model
AVERAGE_TONNES_PER_YEAR = 4.8
AVERAGE_TONNES_LIFETIME = 300


class QuizValidationError(ValueError):
    def __init__(self, missing=None, invalid=None):
        self.missing = list(missing or [])
        self.invalid = list(invalid or [])
        parts = []
        if self.missing:
            parts.append("missing: " + "; ".join(self.missing))
        if self.invalid:
            parts.append("invalid: " + "; ".join(self.invalid))
        super().__init__(", ".join(parts) or "invalid answers")


class AnalysisError(RuntimeError):
    """The AI response was missing, unreachable or not in the expected shape."""


class CarbonAnalysis(BaseModel):
    """Gemini's scored reply. Field aliases are the JSON keys the client sees."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_co2_lifetime: StrictFloat = Field(alias="totalCO2Lifetime")
    percent_above_average: StrictFloat = Field(alias="percentAboveAverage")
    top_contributors: list[StrictStr] = Field(alias="topContributors", min_length=2, max_length=2)
    recommendations: list[StrictStr] = Field(min_length=3, max_length=3)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def _answer(answers: dict, name: str) -> str:
    value = answers.get(name)
    return value.strip() if isinstance(value, str) else ""


def missing_required(section_index: int, answers: dict) -> list[str]:
    """Labels of required fields left blank in one section."""
    if not 0 <= section_index < len(SECTIONS):
        raise IndexError(f"no quiz section {section_index}")
    return [f["label"] for f in SECTIONS[section_index]["fields"]
            if f["required"] and not _answer(answers, f["name"])]


def validate_answers(answers: dict) -> dict:
    """
    Check a full submission and return the cleaned answers
    (known fields only, stripped, blanks dropped).
    """
    if not isinstance(answers, dict):
        raise QuizValidationError(invalid=["form data must be an object"])
    missing = []
    for i in range(len(SECTIONS)):
        missing.extend(missing_required(i, answers))

    invalid = []
    cleaned = {}
    for name, field in FIELDS.items():
        value = _answer(answers, name)
        if not value:
            continue
        if field["type"] == "radio" and value not in field["options"]:
            invalid.append(field["label"])
            continue
        cleaned[name] = value

    if missing or invalid:
        raise QuizValidationError(missing, invalid)
    return cleaned


def build_prompt(answers: dict) -> str:
    return f"""
Estimate the total lifetime carbon footprint (in tonnes CO2 equivalent) of a person given the following lifestyle data.
The average human emits {AVERAGE_TONNES_PER_YEAR} tonnes per year and about {AVERAGE_TONNES_LIFETIME} tonnes in a lifetime.

Reply with JSON only, in exactly this shape:
{{
  "totalCO2Lifetime": <number, tonnes>,
  "percentAboveAverage": <number, negative if below average>,
  "topContributors": [<string>, <string>],
  "recommendations": [<string>, <string>, <string>]
}}

Data:
{json.dumps(answers, indent=2)}
"""


def parse_analysis(text: str | None) -> CarbonAnalysis:
    if not text or not text.strip():
        raise AnalysisError("empty analysis response")
    try:
        return CarbonAnalysis.model_validate_json(text)
    except ValidationError as e:
        raise AnalysisError(f"analysis is not in the expected shape: {e}") from e


class CarbonEstimator:
    """Scores quiz answers with a Gemini model. Create once and reuse."""

    def __init__(self, api_key: str | None = None, model: str = "gemini-2.0-flash", client=None):
        if client is None:
            if not api_key:
                raise AnalysisError("GEMINI_API_KEY is not configured")
            client = genai.Client(api_key=api_key)
        self.client = client
        self.model = model

    def analyze(self, answers: dict) -> CarbonAnalysis:
        prompt = build_prompt(answers)
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=CarbonAnalysis,
                    temperature=0.2,
                ),
            )
        except Exception as e:
            logger.exception("Gemini call failed")
            raise AnalysisError(f"Gemini API call failed: {e}") from e
        return parse_analysis(getattr(response, "text", None))
