"""
Document Parsers
Factory pattern for selecting appropriate parser based on content type
"""

from strategic_insight.parsers.text_parser import TextParser
from strategic_insight.parsers.pdf_parser import PDFParser
from strategic_insight.parsers.docx_parser import DocxParser


class ParserFactory:
    """Factory for selecting appropriate parser based on content type"""

    def __init__(self, pdftotext_path: str = "pdftotext", pdf_timeout: int = 60):
        self.parsers = [
            PDFParser(pdftotext_path=pdftotext_path, timeout=pdf_timeout),
            DocxParser(),
            TextParser(),
        ]

    def get_parser(self, content_type: str):
        """
        Get parser for content type

        Args:
            content_type: MIME type (e.g., "application/pdf")

        Returns:
            Parser instance

        Raises:
            ValueError: If no parser available for content type
        """
        for parser in self.parsers:
            if parser.can_parse(content_type):
                return parser

        raise ValueError(f"No parser available for content type: {content_type}")


__all__ = [
    "ParserFactory",
    "TextParser",
    "PDFParser",
    "DocxParser",
]
