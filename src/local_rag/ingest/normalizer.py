"""Text normalization and tokenization for hashed embeddings."""

from __future__ import annotations

import re

# Anything other than a letter, digit, whitespace or a math symbol becomes a
# space. `\w` also matches the underscore, so it is listed separately.
_DISALLOWED = re.compile(r"[^\w\s+\-*/^=().,:]|_", flags=re.UNICODE)
_WHITESPACE = re.compile(r"\s+", flags=re.UNICODE)


def normalize(text: str) -> str:
    """Lowercase, blank out unsupported characters and collapse whitespace."""
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    lowered = _DISALLOWED.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()


def tokenize(text: str) -> list[str]:
    return [token for token in normalize(text).split(" ") if token]
