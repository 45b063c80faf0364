"""
Text Extractor
Turns a stored upload into raw text using the parser matching its extension
"""

import logging

from strategic_insight.core.exceptions import ExtractionError, UnsupportedFormatError
from strategic_insight.parsers import ParserFactory
from strategic_insight.utils.content_type import content_type_for_extension

logger = logging.getLogger(__name__)


class TextExtractor:
    """Extract raw text from .txt, .pdf and .docx files"""

    def __init__(self, parser_factory: ParserFactory = None):
        self.parser_factory = parser_factory or ParserFactory()

    def extract(self, file_path: str, declared_extension: str) -> str:
        """
        Extract text from a file already written to storage

        Args:
            file_path: Local path of the stored file
            declared_extension: Extension the upload was declared with

        Returns:
            Extracted text

        Raises:
            UnsupportedFormatError: Extension is not .txt, .pdf or .docx
            ExtractionError: The parser failed (wraps the cause)
        """
        content_type = content_type_for_extension(declared_extension)
        if content_type is None:
            raise UnsupportedFormatError(f"Unsupported file type: {declared_extension}")

        parser = self.parser_factory.get_parser(content_type)
        parser_name = parser.__class__.__name__
        logger.info(f"Using parser: {parser_name} for {file_path}")

        try:
            parsed = parser.parse(file_path)
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"{parser_name} failed on {file_path}: {e}")
            raise ExtractionError(f"Failed to extract text: {e}") from e

        return parsed["content"]
