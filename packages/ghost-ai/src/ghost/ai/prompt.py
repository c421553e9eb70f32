"""Prompt construction for inline completions."""

from __future__ import annotations

import json

SYSTEM_PROMPT = (
    "You are an intelligent auto-complete assistant. Provide natural, contextual completions "
    "that match the user's writing style and intent. Keep completions concise and relevant. "
    "Don't repeat what the user has already written."
)

_QUOTE_PAIRS = (('"', '"'), ("“", "”"), ("'", "'"))


def build_user_prompt(user_text: str) -> str:
    """Wrap the user's text in the completion instruction.

    The text is embedded as a JSON string literal so quotes and newlines in it
    cannot terminate the quoted block early.
    """
    quoted = json.dumps(user_text, ensure_ascii=False)
    return f"Complete this text naturally, continuing the user's thought: {quoted}"


def build_messages(user_text: str, system_prompt: str = SYSTEM_PROMPT) -> list[dict[str, str]]:
    """Chat-completions message list for a single completion request."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": build_user_prompt(user_text)},
    ]


def clean_completion(text: str) -> str:
    """Strip trailing whitespace and quotes the model wrapped around its answer.

    Leading whitespace is kept: it separates the continuation from the user's text.
    """
    cleaned = text.rstrip()
    body = cleaned.lstrip()
    for open_q, close_q in _QUOTE_PAIRS:
        if len(body) >= 2 and body.startswith(open_q) and body.endswith(close_q):
            inner = body[len(open_q) : len(body) - len(close_q)]
            if open_q not in inner and close_q not in inner:
                leading = cleaned[: len(cleaned) - len(body)]
                return leading + inner
    return cleaned
