"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

EmbeddingVector = NDArray[np.float32]


@dataclass(slots=True)
class TextChunk:
    """A contiguous window of a trimmed source document.

    `window_start`/`window_end` delimit the window before whitespace trimming,
    so `text` is that slice with surrounding whitespace removed.
    """

    index: int
    text: str
    window_start: int
    window_end: int


@dataclass(slots=True)
class ScoredChunk:
    """A chunk with its similarity to the query vector."""

    chunk: TextChunk
    score: float
    rank: int = 0
