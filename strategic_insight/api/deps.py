"""
FastAPI dependencies
Application context, database session and services
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from strategic_insight.core.context import AppContext
from strategic_insight.services.analysis_service import AnalysisService
from strategic_insight.services.ingestion_service import IngestionService
from strategic_insight.storage.base import StorageBackend


def get_context(request: Request) -> AppContext:
    """Application context created at startup"""
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)):
    """
    Dependency for FastAPI endpoints to get database session
    Automatically closes session after request

    Rolls back on exceptions so a failed request never leaves a
    dirty session behind
    """
    db = context.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_storage(context: AppContext = Depends(get_context)) -> StorageBackend:
    """Storage backend for uploaded files"""
    return context.storage


def get_ingestion_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context)
) -> IngestionService:
    """Ingestion pipeline bound to this request's session"""
    return IngestionService(
        db=db,
        storage=context.storage,
        extractor=context.extractor,
        max_upload_size=context.settings.MAX_UPLOAD_SIZE,
    )


def get_analysis_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context)
) -> AnalysisService:
    """Analysis pipeline bound to this request's session"""
    return AnalysisService(db=db, generator=context.generator)
