"""
Fixed-size Chunker

Splits text into consecutive, non-overlapping pieces measured in
characters (code points). Every piece has exactly chunk_size characters
except possibly the last. Joining the pieces gives back the input.
"""

from typing import List
import logging

logger = logging.getLogger(__name__)

# Characters per chunk for stored documents (not user configurable)
CHUNK_SIZE = 1000


def chunk_text(text: str, max_chunk_size: int) -> List[str]:
    """
    Split text into fixed-size pieces

    Args:
        text: Text to split
        max_chunk_size: Characters per piece (positive int)

    Returns:
        Ordered pieces; empty list for empty text

    Raises:
        ValueError: If max_chunk_size is not a positive integer
    """
    if isinstance(max_chunk_size, bool) or not isinstance(max_chunk_size, int) or max_chunk_size < 1:
        raise ValueError(f"max_chunk_size must be a positive integer, got {max_chunk_size!r}")

    return [text[i:i + max_chunk_size] for i in range(0, len(text), max_chunk_size)]


class FixedSizeChunker:
    """Chunker used by the ingestion pipeline"""

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
            raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")
        self.chunk_size = chunk_size

    def chunk(self, text: str) -> List[str]:
        """Split text into chunk_size pieces"""
        chunks = chunk_text(text, self.chunk_size)
        logger.debug(f"Split {len(text)} characters into {len(chunks)} chunks")
        return chunks
