"""
Analysis API endpoints
Ask questions about a document and read back the conversation
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from strategic_insight.api.deps import get_analysis_service
from strategic_insight.schemas.chat import AnalyzeRequest, AnalyzeResponse, ChatMessageResponse
from strategic_insight.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/documents", tags=["chat"])


@router.post("/{document_id}/analyze", response_model=AnalyzeResponse)
async def analyze_document(
    document_id: str,
    request: AnalyzeRequest,
    user_id: str = "",
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """
    Answer a question using only the document's content

    The question and the answer are stored as chat history.

    Args:
        document_id: Document UUID
        request: Query
        user_id: Asking user (query parameter)

    Returns:
        AnalyzeResponse: Generated answer

    Raises:
        400 missing user ID, 404 unknown document, 502 generation failure
    """
    reply = await analysis.analyze(
        document_id=document_id,
        user_id=user_id,
        query=request.query,
    )
    return AnalyzeResponse(response=reply)


@router.get("/{document_id}/chat-history", response_model=List[ChatMessageResponse])
async def get_chat_history(
    document_id: str,
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """
    Get a document's chat history in chronological order

    Raises:
        404 if document not found
    """
    return [
        ChatMessageResponse.model_validate(message)
        for message in analysis.get_chat_history(document_id)
    ]
