"""Embedding abstractions and the deterministic feature-hashing embedder."""

from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

from local_rag.config import DEFAULT_DIMENSIONS, FNV_OFFSET_BASIS, EmbeddingConfig
from local_rag.ingest.normalizer import tokenize
from local_rag.types import EmbeddingVector

_UINT32_MASK = 0xFFFFFFFF


class Embedder(ABC):
    """Embedder interface used by the retriever."""

    @abstractmethod
    def embed_documents(self, texts: list[str]) -> list[EmbeddingVector]:
        """Embed many documents."""

    @abstractmethod
    def embed_query(self, text: str) -> EmbeddingVector:
        """Embed one query."""


class HashingEmbedder(Embedder):
    """Maps token sequences to unit vectors via signed feature hashing.

    No model, no state: two embedders with the same `dimensions` produce
    identical vectors for identical text.
    """

    def __init__(self, config: EmbeddingConfig | None = None) -> None:
        self.config = config or EmbeddingConfig()
        self.dimensions = self.config.dimensions

    def embed_documents(self, texts: list[str]) -> list[EmbeddingVector]:
        return [embed(text, self.dimensions) for text in texts]

    def embed_query(self, text: str) -> EmbeddingVector:
        return embed(text, self.dimensions)


def _utf16_units(token: str) -> tuple[int, ...]:
    data = token.encode("utf-16-le", errors="surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def _mix(units: tuple[int, ...]) -> int:
    h = FNV_OFFSET_BASIS
    for code in units:
        h ^= code
        h = (h + (h << 1) + (h << 4) + (h << 7) + (h << 8) + (h << 24)) & _UINT32_MASK
    return h


def hash_token(token: str) -> int:
    """32-bit FNV-style hash over the UTF-16 code units of `token`.

    Every step wraps at 2**32 so results match other implementations bit for bit.
    """
    return _mix(_utf16_units(token))


def embed(text: str, dimensions: int = DEFAULT_DIMENSIONS) -> EmbeddingVector:
    """Embed `text` into a float32 vector of length `dimensions`.

    Returns the all-zero vector when `text` has no tokens, otherwise a vector
    with L2 norm 1. Colliding tokens accumulate into the same component.
    """
    dimensions = EmbeddingConfig(dimensions=dimensions).dimensions

    vector = np.zeros(dimensions, dtype=np.float32)
    tokens = tokenize(text)
    if not tokens:
        return vector

    for token in tokens:
        units = _utf16_units(token)
        h = _mix(units)
        index = h % dimensions
        sign = 1.0 if ((h >> 1) & 1) == 0 else -1.0
        # Weight uses the UTF-16 length to stay consistent with the hash input.
        weight = 1.0 + math.log(1 + len(units))
        # Sum in double precision, store rounded to float32.
        vector[index] = float(vector[index]) + sign * weight

    widened = vector.astype(np.float64)
    norm = math.sqrt(float(widened @ widened)) or 1.0
    return (widened / norm).astype(np.float32)


def similarity(a: Sequence[float] | EmbeddingVector, b: Sequence[float] | EmbeddingVector) -> float:
    """Dot product over the shared prefix of `a` and `b`.

    Equals cosine similarity for two non-zero vectors produced by `embed`.
    """
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    length = min(left.shape[0], right.shape[0])
    if length == 0:
        return 0.0
    return float(left[:length] @ right[:length])
