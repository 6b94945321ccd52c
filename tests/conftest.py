"""
Shared fixtures: a scripted stand-in for `services.gemini.GeminiClient`.
"""
from __future__ import annotations

import pytest


class FakeGemini:
    """Answers each `generate` call with the next scripted value (str / None / exception)."""

    model = "fake-gemini"

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls: list[dict] = []

    def generate(self, prompt, *, image=None, mime_type="image/jpeg", response_schema=None):
        self.calls.append(
            dict(prompt=prompt, image=image, mime_type=mime_type, response_schema=response_schema)
        )
        if not self.answers:
            raise AssertionError(f"unexpected Gemini call #{len(self.calls)}: {prompt[:60]!r}")
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def fake_gemini():
    return FakeGemini
