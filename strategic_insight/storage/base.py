"""
Abstract base class for storage backends
Defines the interface for durable byte storage addressed by opaque paths
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Union


class StorageBackend(ABC):
    """Abstract base class for file storage backends"""

    @abstractmethod
    def save(
        self,
        file: Union[BinaryIO, bytes],
        document_id: str,
        extension: str
    ) -> str:
        """
        Save file in full under a location derived from the document ID

        Args:
            file: File object or bytes to save
            document_id: Document ID (unique, so locations never collide)
            extension: Lowercase file extension including the dot

        Returns:
            str: Storage path/key for the saved file

        Raises:
            StorageWriteError: If the bytes could not be written completely
        """
        pass

    @abstractmethod
    def read(self, storage_path: str) -> bytes:
        """
        Read file content

        Args:
            storage_path: Path/key returned by save()

        Returns:
            bytes: File content
        """
        pass

    @abstractmethod
    def delete(self, storage_path: str):
        """
        Delete file from storage

        Args:
            storage_path: Path/key returned by save()
        """
        pass

    @abstractmethod
    def exists(self, storage_path: str) -> bool:
        """
        Check if file exists

        Args:
            storage_path: Path/key returned by save()

        Returns:
            bool: True if file exists
        """
        pass

    @abstractmethod
    def get_local_path(self, storage_path: str) -> str:
        """
        Get local filesystem path for the file (used by text extraction)

        Args:
            storage_path: Path/key returned by save()

        Returns:
            str: Local filesystem path
        """
        pass
