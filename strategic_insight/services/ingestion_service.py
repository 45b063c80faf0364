"""
Ingestion Service
Upload validation → storage write → text extraction → chunking → persistence
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from strategic_insight.chunking import FixedSizeChunker
from strategic_insight.core.exceptions import (
    ExtractionError,
    MissingOwnerError,
    NotFoundError,
    PayloadTooLargeError,
    PersistenceError,
    UnsupportedFormatError,
)
from strategic_insight.models.chunk import DocumentChunk
from strategic_insight.models.document import Document
from strategic_insight.models.user import User
from strategic_insight.services.text_extractor import TextExtractor
from strategic_insight.storage.base import StorageBackend
from strategic_insight.utils.content_type import content_type_for_extension, file_extension

logger = logging.getLogger(__name__)


class IngestionService:
    """
    Turns an uploaded file into a Document plus its DocumentChunks

    The Document row and all chunk rows are committed in one transaction.
    Whenever ingestion fails after the file was stored, the file is removed
    again so no orphaned upload is left behind.
    """

    def __init__(
        self,
        db: Session,
        storage: StorageBackend,
        extractor: TextExtractor,
        chunker: Optional[FixedSizeChunker] = None,
        max_upload_size: int = 10 * 1024 * 1024,
    ):
        self.db = db
        self.storage = storage
        self.extractor = extractor
        self.chunker = chunker or FixedSizeChunker()
        self.max_upload_size = max_upload_size

    def ingest(self, owner_user_id: str, content: bytes, file_name: str) -> Document:
        """
        Ingest one uploaded file

        Args:
            owner_user_id: ID of the uploading user
            content: Uploaded bytes
            file_name: Original filename (its extension selects the parser)

        Returns:
            Document: The created document

        Raises:
            MissingOwnerError: owner_user_id is empty
            PayloadTooLargeError: content exceeds max_upload_size
            UnsupportedFormatError: extension is not .txt, .pdf or .docx
            NotFoundError: owner does not exist
            StorageWriteError: file could not be stored
            ExtractionError: text could not be extracted
            PersistenceError: database write failed
        """
        if not owner_user_id:
            raise MissingOwnerError("User ID required")

        if len(content) > self.max_upload_size:
            raise PayloadTooLargeError(
                f"File too large. Maximum size is {self.max_upload_size / 1024 / 1024:.1f}MB, "
                f"got {len(content) / 1024 / 1024:.1f}MB"
            )

        extension = file_extension(file_name)
        content_type = content_type_for_extension(extension)
        if content_type is None:
            raise UnsupportedFormatError("Only PDF, TXT, and DOCX files are allowed")

        if self.db.get(User, owner_user_id) is None:
            raise NotFoundError(f"User {owner_user_id} not found")

        document_id = str(uuid.uuid4())
        storage_path = self.storage.save(file=content, document_id=document_id, extension=extension)
        logger.info(f"Stored upload {file_name} for document {document_id} at {storage_path}")

        try:
            text = self.extractor.extract(self.storage.get_local_path(storage_path), extension)
        except ExtractionError as e:
            logger.error(f"Extraction failed for document {document_id}: {e}")
            self._discard_file(storage_path)
            raise

        document = Document(
            id=document_id,
            user_id=owner_user_id,
            file_name=file_name,
            storage_path=storage_path,
            content_type=content_type,
            size_bytes=len(content),
            uploaded_at=datetime.now(timezone.utc),
        )

        try:
            self.db.add(document)
            # Document row must exist before any chunk references it
            self.db.flush()

            chunks = self.chunker.chunk(text)
            self.db.add_all([
                DocumentChunk(document_id=document_id, chunk_index=index, content=piece)
                for index, piece in enumerate(chunks)
            ])
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save document {document_id}: {e}")
            self.db.rollback()
            self._discard_file(storage_path)
            raise PersistenceError(f"Failed to save document: {e}") from e

        self.db.refresh(document)
        logger.info(f"Ingested document {document_id}: {len(text)} characters, {len(chunks)} chunks")
        return document

    def _discard_file(self, storage_path: str):
        """Remove a stored upload that no Document row will reference"""
        try:
            self.storage.delete(storage_path)
            logger.info(f"Cleaned up file: {storage_path}")
        except Exception as cleanup_error:
            logger.error(f"Failed to clean up file {storage_path}: {cleanup_error}")
