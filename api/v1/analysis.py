# api/v1/analysis.py
from __future__ import annotations

import base64
import binascii
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from config import Settings, get_settings
from core.analysis import AnalysisError, analyze_meal
from services.gemini import GeminiClient
from api.v1.schemas import AnalyzeImageIn, AnalysisOut, ErrorOut

Logger = logging.getLogger(__name__)

router = APIRouter()


# ───────────────────────── dependencies ─────────────────────
def get_gemini(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> GeminiClient:
    """The client built by `create_app`; 500 when no API key is configured."""
    if not settings.gemini_api_key:
        Logger.error("GEMINI_API_KEY is not defined. Check environment variables.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error: API key missing.",
        )
    return request.app.state.gemini


# ───────────────────────── helpers ──────────────────────────
def _decode_image(body: AnalyzeImageIn | None) -> tuple[bytes, str]:
    """base64 / data-URL ➜ (raw bytes, mime type)."""
    raw = (body.image_base64 or "").strip() if body else ""
    if not raw:
        raise HTTPException(status_code=400, detail="No image data provided.")

    mime_type = body.mime_type
    if raw.startswith("data:"):
        header, _, raw = raw.partition(",")
        mime_type = header[len("data:"):].split(";")[0] or mime_type

    try:
        image = base64.b64decode("".join(raw.split()), validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=400, detail="Invalid base64 image data.")
    if not image:
        raise HTTPException(status_code=400, detail="No image data provided.")
    return image, mime_type


# ───────────────────────── analyze ──────────────────────────
@router.post(
    "/analyze-image",
    response_model=AnalysisOut,
    status_code=status.HTTP_200_OK,
    summary="Identify the food in an image, estimate calories, name it and suggest a recipe",
    responses={
        400: {"model": ErrorOut},
        413: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)
def analyze_image(
    body: AnalyzeImageIn | None = None,
    gemini: GeminiClient = Depends(get_gemini),
) -> AnalysisOut:
    image, mime_type = _decode_image(body)
    try:
        return analyze_meal(gemini, image, mime_type)
    except AnalysisError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    except Exception as e:
        Logger.exception("Server-side analysis error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal server error occurred during analysis.",
        ) from e
