from __future__ import annotations

from pydantic import BaseModel, Field

from core.models.meal import AnalysisResult, FoodItem


class AnalyzeImageIn(BaseModel):
    image_base64: str | None = Field(
        None,
        alias="imageBase64",
        description="base64-encoded image, bare or as a data: URL",
    )
    mime_type: str = Field("image/jpeg", alias="mimeType", examples=["image/jpeg", "image/png"])

    model_config = {"populate_by_name": True}


class ErrorOut(BaseModel):
    error: str


AnalysisOut = AnalysisResult
