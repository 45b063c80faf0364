"""
Analysis Service
Answers a question about one document and records the exchange as chat history
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from strategic_insight.core.exceptions import MissingOwnerError, NotFoundError
from strategic_insight.models.chat_message import ChatMessage, MessageType
from strategic_insight.models.chunk import DocumentChunk
from strategic_insight.models.document import Document
from strategic_insight.prompts import PromptBuilder
from strategic_insight.services.insight_generator import InsightGenerator

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Document question answering

    The full document (all chunks in order) is sent as context; there
    is no retrieval or ranking step.
    """

    def __init__(
        self,
        db: Session,
        generator: InsightGenerator,
        prompt_builder: Optional[PromptBuilder] = None,
    ):
        self.db = db
        self.generator = generator
        self.prompt_builder = prompt_builder or PromptBuilder()

    def _get_document(self, document_id: str) -> Document:
        document = self.db.get(Document, document_id)
        if document is None:
            raise NotFoundError(f"Document {document_id} not found")
        return document

    def build_context(self, document_id: str) -> str:
        """
        Reassemble a document's text from its chunks

        Each chunk is followed by a newline. A document without chunks
        gives an empty context.
        """
        rows = (
            self.db.query(DocumentChunk.content)
            .filter(DocumentChunk.document_id == document_id)
            .order_by(DocumentChunk.chunk_index)
            .all()
        )
        return "".join(f"{content}\n" for (content,) in rows)

    async def analyze(self, document_id: str, user_id: str, query: str) -> str:
        """
        Answer a query from the document's content

        Args:
            document_id: Document to ask about
            user_id: User asking (recorded on the chat messages)
            query: Natural-language question

        Returns:
            Assistant reply text

        Raises:
            MissingOwnerError: user_id is empty
            NotFoundError: document does not exist
            GenerationError: generation failed (no chat history is written)
        """
        if not user_id:
            raise MissingOwnerError("User ID required")

        self._get_document(document_id)

        context = self.build_context(document_id)
        prompt = self.prompt_builder.build_document_prompt(document_content=context, query=query)

        reply = await self.generator.generate(prompt)

        self._save_exchange(document_id, user_id, query, reply)
        return reply

    def _save_exchange(self, document_id: str, user_id: str, query: str, reply: str):
        """
        Persist the user/assistant message pair with one shared timestamp

        Failures are logged and swallowed: the reply has already been
        produced and is still returned to the caller.
        """
        now = datetime.now(timezone.utc)
        try:
            self.db.add_all([
                ChatMessage(
                    document_id=document_id,
                    user_id=user_id,
                    message_type=MessageType.USER.value,
                    message_content=query,
                    timestamp=now,
                ),
                ChatMessage(
                    document_id=document_id,
                    user_id=user_id,
                    message_type=MessageType.ASSISTANT.value,
                    message_content=reply,
                    timestamp=now,
                ),
            ])
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save chat messages for document {document_id}: {e}")
            self.db.rollback()

    def get_chat_history(self, document_id: str) -> List[ChatMessage]:
        """
        Chat history for a document in chronological order

        Messages of one exchange share a timestamp, so the user message
        is ordered before the assistant reply explicitly.

        Raises:
            NotFoundError: document does not exist
        """
        self._get_document(document_id)

        user_first = case((ChatMessage.message_type == MessageType.USER.value, 0), else_=1)
        return (
            self.db.query(ChatMessage)
            .filter(ChatMessage.document_id == document_id)
            .order_by(ChatMessage.timestamp, user_first)
            .all()
        )
