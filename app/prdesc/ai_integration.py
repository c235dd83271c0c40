from __future__ import annotations

import google.generativeai as genai

from .config import Settings
from .errors import GenerationError
from .prompt_builder import build_description_prompt

GENERATION_TEMPERATURE = 0.5
MAX_OUTPUT_TOKENS = 1024


def get_gemini_model(settings: Settings) -> genai.GenerativeModel:
    genai.configure(api_key=settings.gemini_api_key)
    return genai.GenerativeModel(settings.gemini_model)


def _first_candidate_text(response) -> str | None:
    """Concatenated text parts of the first candidate, or None if it has none.

    `response.text` raises on empty or blocked candidates, so the parts are
    read directly.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    texts = [part.text for part in parts if getattr(part, "text", None)]
    if not texts:
        return None
    return "".join(texts)


def generate_pr_description(model: genai.GenerativeModel, commits: str, diff: str) -> str:
    prompt = build_description_prompt(commits, diff)
    print(f"🤖 Generating PR description with {getattr(model, 'model_name', 'Gemini')}...")
    response = model.generate_content(
        prompt,
        generation_config=genai.GenerationConfig(
            temperature=GENERATION_TEMPERATURE,
            max_output_tokens=MAX_OUTPUT_TOKENS,
        ),
    )
    text = _first_candidate_text(response)
    if text is None or not text.strip():
        raise GenerationError("Gemini failed to generate PR description.")
    result = text.strip()
    print(f"   ✅ Generated {len(result)} characters of description")
    return result
