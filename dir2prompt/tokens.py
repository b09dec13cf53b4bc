"""Approximate token counting for language-model prompts."""

from __future__ import annotations

import regex

_PIECES = regex.compile(
    r"(?i:'s|'t|'re|'ve|'m|'ll|'d)"
    r"|[^\r\n\p{L}\p{N}]?\p{L}+"
    r"|\p{N}{1,3}"
    r"| ?[^\s\p{L}\p{N}]+[\r\n]*"
    r"|\s*[\r\n]+"
    r"|\s+(?!\S)"
    r"|\s+"
)


def split_tokens(text: str) -> list[str]:
    """Split text into word-like pieces the way GPT-style tokenizers do.

    Joining the pieces gives back the original text.
    """
    return _PIECES.findall(text)


def estimate_tokens(text: str) -> int:
    """Return an estimate of the number of tokens in ``text``."""
    return len(split_tokens(text))