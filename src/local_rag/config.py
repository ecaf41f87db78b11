"""Configuration models for local text retrieval."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DIMENSIONS = 384
FNV_OFFSET_BASIS = 2166136261


class EmbeddingConfig(BaseModel):
    """Configures the width of hashed token vectors."""

    model_config = ConfigDict(extra="forbid")

    dimensions: int = Field(default=DEFAULT_DIMENSIONS, ge=1)


class ChunkingConfig(BaseModel):
    """Configures boundary-aware sliding-window chunking.

    `overlap_chars` may exceed `max_chunk_chars`; the chunker still advances.
    """

    model_config = ConfigDict(extra="forbid")

    max_chunk_chars: int = Field(default=900, ge=1)
    overlap_chars: int = Field(default=160, ge=0)


class RetrievalConfig(BaseModel):
    """Per-call retrieval options: result count plus chunk window."""

    model_config = ConfigDict(extra="forbid")

    top_k: int = Field(default=5, ge=0)
    max_chunk_chars: int = Field(default=900, ge=1)
    overlap_chars: int = Field(default=160, ge=0)

    def chunking(self) -> ChunkingConfig:
        return ChunkingConfig(
            max_chunk_chars=self.max_chunk_chars,
            overlap_chars=self.overlap_chars,
        )
