"""
Local file storage
Implements StorageBackend interface for the local filesystem
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Union

from strategic_insight.core.exceptions import StorageWriteError
from strategic_insight.storage.base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    """Local file storage rooted at a single upload directory"""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_document_path(self, document_id: str, extension: str) -> Path:
        """Generate storage path for document"""
        return self.base_path / f"{document_id}{extension}"

    def _resolve(self, storage_path: str) -> Path:
        """Absolute path for a storage key, refusing keys that escape base_path"""
        absolute_path = (self.base_path / storage_path).resolve()
        try:
            absolute_path.relative_to(self.base_path.resolve())
        except ValueError:
            raise PermissionError(f"Access denied: {storage_path} is outside the upload directory")
        return absolute_path

    def save(
        self,
        file: Union[BinaryIO, bytes],
        document_id: str,
        extension: str
    ) -> str:
        """Save file to local storage, writing to a temp file first so no partial file is left"""
        file_path = self._get_document_path(document_id, extension)
        partial_path = file_path.with_name(file_path.name + ".partial")

        try:
            with open(partial_path, "wb") as f:
                if isinstance(file, bytes):
                    f.write(file)
                else:
                    f.write(file.read())
            os.replace(partial_path, file_path)
        except OSError as e:
            logger.error(f"Failed to write {file_path}: {e}")
            partial_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Failed to save file: {e}") from e

        # Return relative path from base_path
        return str(file_path.relative_to(self.base_path))

    def read(self, storage_path: str) -> bytes:
        """Read file content"""
        with open(self._resolve(storage_path), "rb") as f:
            return f.read()

    def delete(self, storage_path: str):
        """Delete file; a file that is already gone is not an error"""
        self._resolve(storage_path).unlink(missing_ok=True)

    def exists(self, storage_path: str) -> bool:
        """Check if file exists"""
        return self._resolve(storage_path).exists()

    def get_local_path(self, storage_path: str) -> str:
        """Get absolute local path"""
        return str(self._resolve(storage_path))
