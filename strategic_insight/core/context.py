"""
Application context

Everything a request handler needs (settings, database, storage, text
extraction, generation) is built once at startup and hung on
app.state.context. Handlers reach it through api.deps.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from strategic_insight.config import Settings
from strategic_insight.database import create_db_engine, create_session_factory
from strategic_insight.parsers import ParserFactory
from strategic_insight.services.insight_generator import InsightGenerator
from strategic_insight.services.text_extractor import TextExtractor
from strategic_insight.storage import LocalStorage, StorageBackend

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Process-wide collaborators shared by all requests"""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    storage: StorageBackend
    extractor: TextExtractor
    generator: InsightGenerator

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        generator: Optional[InsightGenerator] = None,
        storage: Optional[StorageBackend] = None,
        engine: Optional[Engine] = None,
    ) -> "AppContext":
        """
        Build the context from settings

        Collaborators passed in explicitly are used as-is (tests inject
        a stub generator this way).

        Raises:
            ConfigurationError: No generator given and GEMINI_API_KEY unset
        """
        if generator is None:
            generator = InsightGenerator.from_settings(settings)

        if engine is None:
            engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)

        if storage is None:
            logger.info(f"Using local file storage: {settings.UPLOAD_DIR}")
            storage = LocalStorage(base_path=settings.UPLOAD_DIR)

        extractor = TextExtractor(
            ParserFactory(
                pdftotext_path=settings.PDFTOTEXT_PATH,
                pdf_timeout=settings.PDF_EXTRACTION_TIMEOUT,
            )
        )

        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            storage=storage,
            extractor=extractor,
            generator=generator,
        )
