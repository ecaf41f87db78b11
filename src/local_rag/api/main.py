"""FastAPI entrypoint for embed/chunk/retrieve endpoints."""

from __future__ import annotations

import math
import os
from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel, Field

from local_rag.config import DEFAULT_DIMENSIONS, ChunkingConfig, RetrievalConfig
from local_rag.ingest.chunker import BoundaryAwareChunker
from local_rag.ingest.embedder import embed
from local_rag.obs.logger import configure_logging
from local_rag.obs.tracing import Timer
from local_rag.retrieval.retriever import LocalRetriever


class EmbedRequest(BaseModel):
    text: str
    dimensions: int = Field(default=DEFAULT_DIMENSIONS, ge=1, le=8192)


class ChunkRequest(BaseModel):
    text: str
    max_chunk_chars: int = Field(default=900, ge=1)
    overlap_chars: int = Field(default=160, ge=0)


class RetrieveRequest(BaseModel):
    query: str
    document_text: str
    top_k: int = Field(default=5, ge=0, le=100)
    max_chunk_chars: int = Field(default=900, ge=1)
    overlap_chars: int = Field(default=160, ge=0)


configure_logging(os.getenv("LOCAL_RAG_LOG_LEVEL", "INFO"))

app = FastAPI(title="Local Retrieval Service", version="0.1.0")

_retriever = LocalRetriever()


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok", "dimensions": DEFAULT_DIMENSIONS}


@app.post("/embed")
def embed_text(request: EmbedRequest) -> dict[str, Any]:
    vector = embed(request.text, request.dimensions)
    values = vector.tolist()
    return {
        "dimensions": len(values),
        "vector": values,
        "norm": math.sqrt(sum(value * value for value in values)),
    }


@app.post("/chunk")
def chunk(request: ChunkRequest) -> dict[str, Any]:
    chunker = BoundaryAwareChunker(
        ChunkingConfig(
            max_chunk_chars=request.max_chunk_chars,
            overlap_chars=request.overlap_chars,
        )
    )
    return {
        "items": [
            {
                "index": item.index,
                "text": item.text,
                "window_start": item.window_start,
                "window_end": item.window_end,
            }
            for item in chunker.chunk(request.text)
        ]
    }


@app.post("/retrieve")
def retrieve(request: RetrieveRequest) -> dict[str, Any]:
    config = RetrievalConfig(
        top_k=request.top_k,
        max_chunk_chars=request.max_chunk_chars,
        overlap_chars=request.overlap_chars,
    )
    with Timer() as timer:
        hits = _retriever.rank(request.query, request.document_text, config)
    return {
        "items": [
            {
                "index": hit.chunk.index,
                "rank": hit.rank,
                "score": hit.score,
                "text": hit.chunk.text,
            }
            for hit in hits
        ],
        "latency_ms": timer.elapsed_ms,
    }
