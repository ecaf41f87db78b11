"""Local hashed-embedding text retrieval."""

from .config import ChunkingConfig, EmbeddingConfig, RetrievalConfig
from .ingest.chunker import BoundaryAwareChunker, chunk_text
from .ingest.embedder import HashingEmbedder, embed, similarity
from .ingest.normalizer import normalize, tokenize
from .retrieval.retriever import LocalRetriever, retrieve

__all__ = [
    "BoundaryAwareChunker",
    "ChunkingConfig",
    "EmbeddingConfig",
    "HashingEmbedder",
    "LocalRetriever",
    "RetrievalConfig",
    "chunk_text",
    "embed",
    "normalize",
    "retrieve",
    "similarity",
    "tokenize",
]
