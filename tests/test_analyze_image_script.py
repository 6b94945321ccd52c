# tests/test_analyze_image_script.py
from __future__ import annotations

import json

import pytest

from scripts import analyze_image


@pytest.fixture
def photo(tmp_path):
    p = tmp_path / "lunch.png"
    p.write_bytes(b"\x89PNG fake")
    return p


def test_prints_result_json(monkeypatch, capsys, photo, fake_gemini):
    gemini = fake_gemini("a banana", '[{"foodItem": "Banana", "estimatedCalories": 105}]', "Banana Snack", "Peel and eat.")
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(analyze_image, "GeminiClient", lambda *a, **kw: gemini)

    assert analyze_image.main([str(photo)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["mealName"] == "Banana Snack"
    assert out["totalCalories"] == 105
    assert gemini.calls[0]["mime_type"] == "image/png"


def test_fatal_error_exits_non_zero(monkeypatch, capsys, photo, fake_gemini):
    gemini = fake_gemini(None)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(analyze_image, "GeminiClient", lambda *a, **kw: gemini)

    assert analyze_image.main([str(photo)]) == 1
    assert "Could not get a description of the food." in capsys.readouterr().err


def test_missing_key(monkeypatch, photo):
    monkeypatch.setenv("GEMINI_API_KEY", "")
    assert analyze_image.main([str(photo)]) == 2
