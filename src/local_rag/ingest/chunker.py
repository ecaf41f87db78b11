"""Boundary-aware sliding-window chunking over characters."""

from __future__ import annotations

import logging
import math

from local_rag.config import ChunkingConfig
from local_rag.types import TextChunk

logger = logging.getLogger(__name__)

_BREAKPOINTS = ("\n\n", "\n", ". ", " ")
_BOUNDARY_RATIO = 0.6
# Whitespace trimmed around documents and chunks: U+FEFF counts, \x1c-\x1f do not.
_TRIM_CHARS = (
    "\t\n\v\f\r \xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class BoundaryAwareChunker:
    """Splits a document into overlapping windows of at most `max_chunk_chars`.

    Design notes:
    1. Hard window first.
       Each window starts at the cursor and spans `max_chunk_chars` characters,
       clipped to the end of the source.

    2. Boundary snapping second.
       Unless the window already reaches the end, the latest paragraph break,
       line break, sentence end or space at or before the window end is
       located. If it lies beyond `floor(0.6 * max_chunk_chars)` from the
       window start, the window is cut just after it; otherwise the hard cut
       stands. This keeps snapped windows from collapsing into tiny fragments.

    3. Overlap with guaranteed progress.
       The next window starts `overlap_chars` before the current end. If that
       would not move the cursor forward (overlap as large as the window), the
       next window starts at the current end instead, so the loop always
       terminates and the windows cover the source without gaps.
    """

    def __init__(self, config: ChunkingConfig | None = None) -> None:
        self.config = config or ChunkingConfig()

    def chunk(self, text: str) -> list[TextChunk]:
        """Chunk `text` into ordered, trimmed, non-empty windows.

        Args:
            text: Raw document text. Leading/trailing whitespace is dropped
                before windowing, and offsets refer to the trimmed source.

        Returns:
            `TextChunk` objects in source order. Empty for blank input; a single
            chunk when the trimmed text fits in one window.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        source = text.strip(_TRIM_CHARS)
        if not source:
            return []

        length = len(source)
        max_chars = self.config.max_chunk_chars
        if length <= max_chars:
            return [TextChunk(index=0, text=source, window_start=0, window_end=length)]

        min_boundary = math.floor(max_chars * _BOUNDARY_RATIO)
        chunks: list[TextChunk] = []
        start = 0

        while start < length:
            end = min(length, start + max_chars)

            if end < length:
                best = self._last_breakpoint(source, end)
                if best > start + min_boundary:
                    end = best + 1

            piece = source[start:end].strip(_TRIM_CHARS)
            if piece:
                chunks.append(
                    TextChunk(index=len(chunks), text=piece, window_start=start, window_end=end)
                )

            if end >= length:
                break

            next_start = max(0, end - self.config.overlap_chars)
            start = next_start if next_start > start else end

        logger.debug(
            "chunked %d chars into %d chunks (max=%d, overlap=%d)",
            length,
            len(chunks),
            max_chars,
            self.config.overlap_chars,
        )
        return chunks

    @staticmethod
    def _last_breakpoint(source: str, end: int) -> int:
        # Latest occurrence starting at or before `end`, -1 when absent.
        return max(source.rfind(marker, 0, end + len(marker)) for marker in _BREAKPOINTS)


def chunk_text(text: str, max_chunk_chars: int = 900, overlap_chars: int = 160) -> list[str]:
    """Return chunk texts for `text` using the given window and overlap."""
    config = ChunkingConfig(max_chunk_chars=max_chunk_chars, overlap_chars=overlap_chars)
    return [chunk.text for chunk in BoundaryAwareChunker(config).chunk(text)]
