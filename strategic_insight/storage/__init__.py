"""
File storage system
Uploaded documents are kept on the local filesystem
"""

from strategic_insight.storage.base import StorageBackend
from strategic_insight.storage.local import LocalStorage

__all__ = [
    "StorageBackend",
    "LocalStorage",
]
