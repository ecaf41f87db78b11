"""LangChain adapters for the hashing embedder and the local retriever."""

from __future__ import annotations

from langchain_core.embeddings import Embeddings
from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from local_rag.config import RetrievalConfig
from local_rag.ingest.embedder import HashingEmbedder
from local_rag.retrieval.retriever import LocalRetriever


class LangChainHashingEmbeddings(Embeddings):
    """Exposes `HashingEmbedder` through the LangChain `Embeddings` contract.

    LangChain vector stores expect plain `list[float]`, so float32 arrays are
    converted on the way out.
    """

    def __init__(self, embedder: HashingEmbedder | None = None) -> None:
        self._embedder = embedder or HashingEmbedder()

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [vector.tolist() for vector in self._embedder.embed_documents(texts)]

    def embed_query(self, text: str) -> list[float]:
        return self._embedder.embed_query(text).tolist()


class RetrieveToolInput(BaseModel):
    query: str
    document_text: str
    top_k: int = Field(default=5, ge=1, le=20)
    max_chunk_chars: int = Field(default=900, ge=1)
    overlap_chars: int = Field(default=160, ge=0)


def build_retrieve_tool(retriever: LocalRetriever | None = None) -> StructuredTool:
    """Wrap `LocalRetriever.rank` as a LangChain tool named `local_retrieve`."""
    active = retriever or LocalRetriever()

    def _retrieve(
        query: str,
        document_text: str,
        top_k: int = 5,
        max_chunk_chars: int = 900,
        overlap_chars: int = 160,
    ) -> str:
        config = RetrievalConfig(
            top_k=top_k,
            max_chunk_chars=max_chunk_chars,
            overlap_chars=overlap_chars,
        )
        hits = active.rank(query, document_text, config)
        if not hits:
            return "NO_RESULTS"
        lines = []
        for hit in hits:
            snippet = hit.chunk.text.replace("\n", " ")
            lines.append(f"[{hit.rank}] score={hit.score:.4f} {snippet}")
        return "\n".join(lines)

    return StructuredTool.from_function(
        name="local_retrieve",
        description="Return the passages of a document most relevant to a query.",
        args_schema=RetrieveToolInput,
        func=_retrieve,
    )
