from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class FoodItem(BaseModel):
    food_item: str = Field(alias="foodItem")
    estimated_calories: int = Field(alias="estimatedCalories")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("estimated_calories", mode="before")
    @classmethod
    def _whole_kcal(cls, v):
        # the schema only promises NUMBER, so 95.0 / 284.6 come back too
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("calorie estimate must be a finite number")
            v = round(v)
        if isinstance(v, int) and v < 0:
            return 0
        return v


class AnalysisResult(BaseModel):
    meal_name: str = Field(alias="mealName")
    food_items: list[FoodItem] = Field(alias="foodItems")
    recipe_steps: str = Field(alias="recipeSteps")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @computed_field(alias="totalCalories")
    @property
    def total_calories(self) -> int:
        return sum(item.estimated_calories for item in self.food_items)
