"""
core/prompts.py
────────────────────────────────────────────────────────────────────────
Prompt templates for the four Gemini calls, plus the response schema the
structured-items call is constrained to.
"""
from __future__ import annotations

from google.genai import types

DESCRIBE_IMAGE_PROMPT = (
    "Describe the food items visible in this image in detail. "
    "Focus on identifiable ingredients and dishes."
)


def food_items_prompt(description: str) -> str:
    return f"""Based on the following food description, identify distinct food items and estimate their calorie content.
Description: "{description}"
Provide your response as a JSON array of objects, where each object has "foodItem" (string) and "estimatedCalories" (number, integer) properties.
Example: [{{"foodItem": "Apple", "estimatedCalories": 95}}, {{"foodItem": "Slice of Pizza", "estimatedCalories": 285}}]
If you cannot identify specific items or calories, return an empty array or items with 0 calories. Be realistic with calorie estimates."""


def meal_name_prompt(item_names: list[str]) -> str:
    joined = ", ".join(item_names)
    return f"""Given the following food items: "{joined}", suggest a concise and appealing name for this meal or recipe.
If it's a collection of unrelated items, you can suggest 'Assorted Plate', 'Mixed Meal', or similar.
Respond with ONLY the suggested name as a plain string. For example: "Hearty Vegetable Stir-fry". Do not include any other text or JSON formatting."""


def recipe_steps_prompt(meal_name: str, item_names: list[str]) -> str:
    joined = ", ".join(item_names)
    return f"""Provide simple preparation steps or a basic recipe for a meal named "{meal_name}" which includes items like: {joined}.
Keep the steps brief and easy to follow. If it's a simple assembly, describe that.
Respond with plain text, using numbered steps or clear paragraphs. For example:
1. Chop vegetables.
2. Sauté onions and garlic.
3. Add remaining ingredients and simmer.
Or: "Combine all ingredients in a bowl and toss with dressing." """


def food_items_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "foodItem": types.Schema(type=types.Type.STRING),
                "estimatedCalories": types.Schema(type=types.Type.NUMBER),
            },
            required=["foodItem", "estimatedCalories"],
        ),
    )
