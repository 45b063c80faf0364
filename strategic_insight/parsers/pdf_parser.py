"""
PDF Parser
Extracts text by running poppler's pdftotext as a subprocess
"""

import logging
import subprocess
from typing import Dict, Any

from strategic_insight.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)


class PDFParser:
    """Parser for PDF files using the pdftotext command line tool"""

    SUPPORTED_FORMATS = {
        "application/pdf",
    }

    def __init__(self, pdftotext_path: str = "pdftotext", timeout: int = 60):
        """
        Args:
            pdftotext_path: Path to pdftotext binary
            timeout: Seconds before a hung pdftotext is killed
        """
        self.pdftotext_path = pdftotext_path
        self.timeout = timeout

    def can_parse(self, content_type: str) -> bool:
        """Check if this parser can handle the content type"""
        return content_type in self.SUPPORTED_FORMATS

    def parse(self, file_path: str) -> Dict[str, Any]:
        """
        Parse PDF and return the text pdftotext writes to stdout

        Args:
            file_path: Path to PDF file

        Returns:
            Dict with content and metadata

        Raises:
            ExtractionError: pdftotext missing, timed out or exited non-zero
        """
        cmd = [
            self.pdftotext_path,
            "-enc", "UTF-8",
            file_path,
            "-",  # Write to stdout
        ]

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout
            )
        except FileNotFoundError as e:
            raise ExtractionError(
                f"pdftotext not found at {self.pdftotext_path}. "
                "Install with: apt-get install poppler-utils (Linux) or brew install poppler (Mac)"
            ) from e
        except subprocess.TimeoutExpired as e:
            logger.error(f"pdftotext timeout: {file_path} took > {self.timeout}s")
            raise ExtractionError(f"PDF extraction timed out after {self.timeout}s") from e
        except OSError as e:
            raise ExtractionError(f"Failed to run pdftotext: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            logger.error(f"pdftotext error ({result.returncode}): {stderr}")
            raise ExtractionError(f"Failed to extract text from PDF: {stderr or 'exit code ' + str(result.returncode)}")

        return {
            "content": result.stdout.decode("utf-8", errors="replace"),
            "metadata": {"extractor": "pdftotext"},
            "page_count": None,
        }
