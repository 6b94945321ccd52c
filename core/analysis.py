"""
core/analysis.py
────────────────────────────────────────────────────────────────────────
Image ➜ meal analysis, as four sequential Gemini calls:

1. describe the food in the image             (fatal on failure)
2. description ➜ JSON list of items + kcal    (fatal on failure)
3. item names ➜ meal name                     (best-effort)
4. meal name + items ➜ preparation steps      (best-effort)

`analyze_meal` wires them together and assembles the `AnalysisResult`.
"""

from __future__ import annotations

import json
import logging
import re

from pydantic import TypeAdapter, ValidationError

from core import prompts
from core.models.meal import AnalysisResult, FoodItem
from services.gemini import GeminiClient, GeminiError

Logger = logging.getLogger(__name__)

DEFAULT_MEAL_NAME = "Suggested Meal"
EMPTY_MEAL_NAME = "No items identified to name."
DEFAULT_RECIPE_STEPS = "No recipe steps available for this combination."

_ITEMS = TypeAdapter(list[FoodItem])
_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


class AnalysisError(Exception):
    """A failure that aborts the whole analysis; carries the HTTP status to report."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _preview(text: str, n: int = 100) -> str:
    return text[:n] + "..." if len(text) > n else text


# ──────────────────────────────────────────────────────────────────────
#  Step 1 – image ➜ description
# ──────────────────────────────────────────────────────────────────────
def describe_image(gemini: GeminiClient, image: bytes, mime_type: str = "image/jpeg") -> str:
    Logger.info("Calling Gemini for image description...")
    try:
        text = gemini.generate(prompts.DESCRIBE_IMAGE_PROMPT, image=image, mime_type=mime_type)
    except GeminiError as e:
        Logger.error("Gemini error (description): %s", e.message)
        raise AnalysisError(e.status_code, f"Error describing image: {e.message}") from e

    if not text:
        Logger.error("Could not extract food description.")
        raise AnalysisError(500, "Could not get a description of the food.")

    Logger.info("Received food description: %s", _preview(text))
    return text


# ──────────────────────────────────────────────────────────────────────
#  Step 2 – description ➜ structured items
# ──────────────────────────────────────────────────────────────────────
def parse_food_items(raw: str) -> list[FoodItem]:
    """
    Validate the model's JSON against `list[FoodItem]`.

    Accepts a bare JSON array or one wrapped in a ```json fence.
    Raises `ValueError` when the text is not JSON of the expected shape.
    """
    match = _FENCE.search(raw)
    body = match.group(1) if match else raw.strip()
    try:
        return _ITEMS.validate_python(json.loads(body))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(str(e)) from e


def extract_food_items(gemini: GeminiClient, description: str) -> list[FoodItem]:
    Logger.info("Calling Gemini for nutrition analysis...")
    try:
        raw = gemini.generate(
            prompts.food_items_prompt(description),
            response_schema=prompts.food_items_schema(),
        )
    except GeminiError as e:
        Logger.error("Gemini error (nutrition): %s", e.message)
        raise AnalysisError(e.status_code, f"Error analyzing nutrition: {e.message}") from e

    if not raw:
        Logger.error("Could not extract nutrition JSON.")
        raise AnalysisError(500, "Could not get nutrition analysis.")
    Logger.info("Received nutrition analysis JSON: %s", _preview(raw))

    try:
        return parse_food_items(raw)
    except ValueError as e:
        Logger.error("Failed to parse nutrition JSON: %s", e)
        raise AnalysisError(500, "Failed to parse nutrition data from AI.") from e


# ──────────────────────────────────────────────────────────────────────
#  Step 3 – meal name (best-effort)
# ──────────────────────────────────────────────────────────────────────
def suggest_meal_name(gemini: GeminiClient, items: list[FoodItem]) -> str:
    if not items:
        return EMPTY_MEAL_NAME

    Logger.info("Calling Gemini for meal name...")
    try:
        text = gemini.generate(prompts.meal_name_prompt([i.food_item for i in items]))
    except GeminiError as e:
        Logger.warning("Gemini error (meal name), using default: %s", e.message)
        return DEFAULT_MEAL_NAME

    name = (text or "").strip().strip('"').strip()
    if not name:
        Logger.warning("Empty meal name from Gemini, using default.")
        return DEFAULT_MEAL_NAME

    Logger.info("Received meal name: %s", name)
    return name


# ──────────────────────────────────────────────────────────────────────
#  Step 4 – recipe steps (best-effort)
# ──────────────────────────────────────────────────────────────────────
def suggest_recipe_steps(gemini: GeminiClient, meal_name: str, items: list[FoodItem]) -> str:
    if not items:
        return DEFAULT_RECIPE_STEPS

    Logger.info("Calling Gemini for recipe steps...")
    try:
        text = gemini.generate(
            prompts.recipe_steps_prompt(meal_name, [i.food_item for i in items])
        )
    except GeminiError as e:
        Logger.warning("Gemini error (recipe steps), using default: %s", e.message)
        return DEFAULT_RECIPE_STEPS

    steps = (text or "").strip()
    if not steps:
        Logger.warning("Empty recipe steps from Gemini, using default.")
        return DEFAULT_RECIPE_STEPS

    Logger.info("Received recipe steps: %s", _preview(steps))
    return steps


# ──────────────────────────────────────────────────────────────────────
#  Pipeline
# ──────────────────────────────────────────────────────────────────────
def analyze_meal(gemini: GeminiClient, image: bytes, mime_type: str = "image/jpeg") -> AnalysisResult:
    description = describe_image(gemini, image, mime_type)
    items = extract_food_items(gemini, description)
    meal_name = suggest_meal_name(gemini, items)
    recipe_steps = suggest_recipe_steps(gemini, meal_name, items)

    return AnalysisResult(
        meal_name=meal_name,
        food_items=items,
        recipe_steps=recipe_steps,
    )
