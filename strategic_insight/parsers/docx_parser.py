"""
DOCX Parser
Word documents via python-docx (pure Python, no CLI needed)
"""

import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


class DocxParser:
    """Parser for Word (.docx) documents"""

    SUPPORTED_FORMATS = {
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }

    def can_parse(self, content_type: str) -> bool:
        """Check if this parser can handle the content type"""
        return content_type in self.SUPPORTED_FORMATS

    def parse(self, file_path: str) -> Dict[str, Any]:
        """
        Extract paragraph text from a DOCX file

        python-docx reads the XML inside the DOCX zip archive.
        Formatting is stripped; empty paragraphs are dropped.

        Args:
            file_path: Path to DOCX file

        Returns:
            Dict with content and metadata
        """
        from docx import Document

        doc = Document(file_path)
        paragraphs = [para.text for para in doc.paragraphs if para.text.strip()]

        logger.info(f"DOCX parsed: {len(paragraphs)} paragraphs from {file_path}")
        return {
            "content": "\n\n".join(paragraphs),
            "metadata": {"paragraph_count": len(paragraphs)},
            "page_count": None,
        }
