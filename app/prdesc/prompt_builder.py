from __future__ import annotations

import os
from functools import lru_cache

import tiktoken


@lru_cache(maxsize=1)
def _encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding("cl100k_base")


def count_tokens(txt: str) -> int:
    return len(_encoding().encode(txt, disallowed_special=()))


def _preview_chars() -> int:
    try:
        return int(os.getenv("LOG_PROMPT_PREVIEW_CHARS", "0"))
    except ValueError:
        return 0


def _log_prompt(prompt: str) -> None:
    # diagnostics only; never allowed to end the run
    try:
        print(f"🧾 Prompt size: {len(prompt)} chars, ~{count_tokens(prompt)} tokens")
    except Exception as e:
        print(f"🧾 Prompt size: {len(prompt)} chars (token count unavailable: {e})")
    preview_n = _preview_chars()
    if preview_n > 0:
        preview = prompt[:preview_n] + ("…" if len(prompt) > preview_n else "")
        print(f"🧾 Prompt preview ({len(prompt)} chars total):\n{preview}")


def build_description_prompt(commits: str, diff: str) -> str:
    prompt = (
        "Generate a PR description in markdown format based on the following git commits and diff:\n\n"
        f"Commits:\n{commits}\n\n"
        f"Diff:\n{diff}"
    )
    _log_prompt(prompt)
    return prompt
