"""
scripts/analyze_image.py
────────────────────────────────────────────────────────────────────────
Run the meal-analysis pipeline against a local image, without the server:

    python -m scripts.analyze_image lunch.jpg
    python -m scripts.analyze_image dinner.png --mime image/png --model gemini-2.5-flash
"""
from __future__ import annotations

import logging
import mimetypes
import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from config import Settings
from core.analysis import AnalysisError, analyze_meal
from services.gemini import GeminiClient


def main(argv: list[str] | None = None) -> int:
    ap = ArgumentParser(description="Analyze a food photo with Gemini")
    ap.add_argument("image", type=Path, help="path to a jpeg/png/webp image")
    ap.add_argument("--model", help="Gemini model (default: GEMINI_MODEL or gemini-2.0-flash)")
    ap.add_argument("--mime", help="image mime type (default: guessed from the file name)")
    args = ap.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if not settings.gemini_api_key:
        print("GEMINI_API_KEY not set in environment", file=sys.stderr)
        return 2

    mime_type = args.mime or mimetypes.guess_type(args.image.name)[0] or "image/jpeg"
    gemini = GeminiClient(settings.gemini_api_key, model=args.model or settings.gemini_model)

    try:
        result = analyze_meal(gemini, args.image.read_bytes(), mime_type)
    except AnalysisError as e:
        print(f"[{e.status_code}] {e.message}", file=sys.stderr)
        return 1

    print(result.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
