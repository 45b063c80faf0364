"""
Document API endpoints
Upload (ingestion), listing, lookup and deletion
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from strategic_insight.api.deps import get_db, get_ingestion_service, get_storage
from strategic_insight.core.exceptions import MissingOwnerError, http_404_not_found
from strategic_insight.models.document import Document
from strategic_insight.schemas.document import DocumentResponse
from strategic_insight.services.ingestion_service import IngestionService
from strategic_insight.storage.base import StorageBackend

router = APIRouter(prefix="/documents", tags=["documents"])
logger = logging.getLogger(__name__)


@router.post("/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile = File(..., description="File to upload (.txt, .pdf, .docx)"),
    user_id: str = Form("", description="Owner user ID"),
    ingestion: IngestionService = Depends(get_ingestion_service)
):
    """
    Upload a document, extract its text and store it in chunks

    Processing happens within the request. Extraction shells out to
    pdftotext for PDFs, so the pipeline runs in the threadpool.

    Returns:
        DocumentResponse: Created document

    Raises:
        400 missing user ID or unsupported format, 413 file too large,
        404 unknown user, 500 storage/extraction/database failure
    """
    content = await file.read()

    document = await run_in_threadpool(
        ingestion.ingest,
        owner_user_id=user_id,
        content=content,
        file_name=file.filename or "",
    )

    return DocumentResponse.model_validate(document)


@router.get("", response_model=List[DocumentResponse])
async def list_documents(
    user_id: str = "",
    db: Session = Depends(get_db)
):
    """
    List a user's documents, newest first

    Args:
        user_id: Owner user ID
        db: Database session

    Returns:
        List of documents

    Raises:
        MissingOwnerError: If user_id is missing (400)
    """
    if not user_id:
        raise MissingOwnerError("User ID required")

    documents = db.query(Document).filter(
        Document.user_id == user_id
    ).order_by(
        Document.uploaded_at.desc(),
        Document.id
    ).all()

    return [DocumentResponse.model_validate(doc) for doc in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    db: Session = Depends(get_db)
):
    """
    Get document by ID

    Raises:
        HTTPException: 404 if document not found
    """
    document = db.get(Document, document_id)

    if not document:
        raise http_404_not_found("Document not found")

    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
):
    """
    Delete document, its chunks and its chat history

    The stored file is removed afterwards on a best-effort basis.

    Returns:
        None (204 No Content)

    Raises:
        HTTPException: 404 if document not found
    """
    document = db.get(Document, document_id)

    if not document:
        raise http_404_not_found("Document not found")

    storage_path = document.storage_path

    # Delete document from database (cascades to chunks and chat history)
    db.delete(document)
    db.commit()

    try:
        storage.delete(storage_path)
    except Exception as e:
        logger.error(f"Failed to delete document file {storage_path}: {e}")

    return None
