"""Utility to extract JSON arrays from generated text."""

from __future__ import annotations

import json

_decoder = json.JSONDecoder()


def extract_json_array(text: str) -> list:
    """Return the first well-formed JSON array literal found in text.

    Tries in order:
    1. Direct json.loads on the full text (after stripping ``` fences)
    2. raw_decode from every '[' until one yields a list

    Raises:
        ValueError: if no array literal can be decoded
    """
    stripped = _strip_code_fences(text.strip())

    try:
        value = json.loads(stripped)
    except (json.JSONDecodeError, TypeError):
        value = None
    if isinstance(value, list):
        return value

    start = stripped.find("[")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(stripped, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, list):
            return value
        start = stripped.find("[", start + 1)

    raise ValueError(f"Could not extract JSON array from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()
