# services/gemini.py
from __future__ import annotations

import logging

import httpx
from google import genai
from google.genai import types, errors as gerrors

Logger = logging.getLogger(__name__)

# ───────────── Model Names ─────────────
CHAT_MODEL = "gemini-2.0-flash"


class GeminiError(RuntimeError):
    """A Gemini call that did not produce a response (HTTP error or transport failure)."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


# ───────────── Response helpers ─────────────
def first_text(resp) -> str | None:
    """Return `candidates[0].content.parts[0].text`, or None if any link is missing."""
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    text = getattr(parts[0], "text", None)
    if isinstance(text, str) and text.strip():
        return text
    return None


# ───────────── Client ─────────────
class GeminiClient:
    """Thin synchronous wrapper over `genai.Client` – one call, one text answer."""

    def __init__(
        self,
        api_key: str,
        model: str = CHAT_MODEL,
        client: genai.Client | None = None,
    ) -> None:
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    def generate(
        self,
        prompt: str,
        *,
        image: bytes | None = None,
        mime_type: str = "image/jpeg",
        response_schema: types.Schema | None = None,
    ) -> str | None:
        """
        Run one `generate_content` call and return the first candidate's text.

        Passing `response_schema` switches the call to JSON output constrained
        to that schema.  Returns None when the response carries no text;
        raises `GeminiError` when the call itself fails.
        """
        parts = [types.Part.from_text(text=prompt)]
        if image is not None:
            parts.append(types.Part.from_bytes(data=image, mime_type=mime_type))

        config = None
        if response_schema is not None:
            config = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
            )

        try:
            resp = self._client.models.generate_content(
                model=self.model,
                contents=[types.Content(role="user", parts=parts)],
                config=config,
            )
        except gerrors.APIError as e:
            raise GeminiError(e.code or 500, e.message or str(e)) from e
        except httpx.HTTPError as e:
            raise GeminiError(502, f"Inference service unreachable: {e}") from e

        return first_text(resp)
