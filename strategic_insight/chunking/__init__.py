"""
Text Chunking System
Fixed-size character chunking
"""

from strategic_insight.chunking.fixed_chunker import CHUNK_SIZE, FixedSizeChunker, chunk_text

__all__ = ["CHUNK_SIZE", "FixedSizeChunker", "chunk_text"]
