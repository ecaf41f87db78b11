"""Query-time retrieval: chunk, embed and rank by cosine similarity."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from local_rag.config import RetrievalConfig
from local_rag.ingest.chunker import BoundaryAwareChunker
from local_rag.ingest.embedder import Embedder, HashingEmbedder, similarity
from local_rag.obs.tracing import Timer
from local_rag.types import ScoredChunk

logger = logging.getLogger(__name__)

RetrieveOptions = RetrievalConfig | Mapping[str, Any] | None


class LocalRetriever:
    """Ranks the chunks of a single document against a query.

    Nothing is indexed or cached: every call re-chunks and re-embeds the
    document, so one instance can serve concurrent callers.
    """

    def __init__(self, embedder: Embedder | None = None) -> None:
        self.embedder = embedder or HashingEmbedder()

    def rank(
        self,
        query: str,
        document_text: str,
        config: RetrievalConfig | None = None,
    ) -> list[ScoredChunk]:
        """Return the top `config.top_k` chunks with scores, best first.

        Chunks with equal scores keep their original document order.
        """
        config = config or RetrievalConfig()
        if not isinstance(query, str):
            raise TypeError(f"query must be str, got {type(query).__name__}")

        with Timer() as timer:
            chunks = BoundaryAwareChunker(config.chunking()).chunk(document_text)
            if not chunks:
                return []

            query_vector = self.embedder.embed_query(query)
            chunk_vectors = self.embedder.embed_documents([chunk.text for chunk in chunks])
            scored = [
                ScoredChunk(chunk=chunk, score=similarity(query_vector, vector))
                for chunk, vector in zip(chunks, chunk_vectors, strict=True)
            ]
            # sorted() is stable, also with reverse=True.
            ranked = sorted(scored, key=lambda item: item.score, reverse=True)

        logger.debug(
            "ranked %d chunks in %.2f ms, returning top %d",
            len(chunks),
            timer.elapsed_ms,
            config.top_k,
        )
        return [
            ScoredChunk(chunk=item.chunk, score=item.score, rank=i + 1)
            for i, item in enumerate(ranked[: config.top_k])
        ]

    def retrieve(
        self,
        query: str,
        document_text: str,
        config: RetrievalConfig | None = None,
    ) -> list[str]:
        return [item.chunk.text for item in self.rank(query, document_text, config)]


def _coerce_options(options: RetrieveOptions) -> RetrievalConfig:
    if options is None:
        return RetrievalConfig()
    if isinstance(options, RetrievalConfig):
        return options
    return RetrievalConfig.model_validate(dict(options))


def retrieve(query: str, document_text: str, options: RetrieveOptions = None) -> list[str]:
    """Return up to `top_k` chunk texts of `document_text` most similar to `query`.

    `options` may be a `RetrievalConfig`, a mapping with any of `top_k`,
    `max_chunk_chars` and `overlap_chars`, or `None` for the defaults.
    """
    return LocalRetriever().retrieve(query, document_text, _coerce_options(options))
