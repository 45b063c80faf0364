"""
Content Type Detection Utility
Maps the accepted upload extensions to MIME types
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Only these extensions are accepted for upload
EXTENSION_MIME_MAP = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_MIME_MAP)


def normalize_extension(extension: str) -> str:
    """
    Lowercase an extension and make sure it starts with a dot

    Examples:
        "PDF" -> ".pdf", ".Txt" -> ".txt", "" -> ""
    """
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return extension


def file_extension(filename: str) -> str:
    """Case-insensitive extension of a filename ("" when there is none)"""
    return Path(filename or "").suffix.lower()


def content_type_for_extension(extension: str) -> Optional[str]:
    """
    MIME type for an accepted extension

    Args:
        extension: Extension with or without leading dot, any case

    Returns:
        MIME type, or None if the extension is not accepted
    """
    detected = EXTENSION_MIME_MAP.get(normalize_extension(extension))
    if detected is None:
        logger.debug(f"No content type for extension {extension!r}")
    return detected
