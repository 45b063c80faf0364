"""
Pytest configuration and shared fixtures for Strategic Insight tests

Provides:
- File-backed SQLite database per test
- Temporary upload directory
- Stub insight generator (no network calls)
- Test users and documents
- Test client wired to an application context
"""

import pytest
from typing import Generator, List, Optional
from sqlalchemy.orm import Session

from strategic_insight.config import Settings
from strategic_insight.core.context import AppContext
from strategic_insight.database import Base, create_db_engine, create_session_factory
from strategic_insight.models.user import User
from strategic_insight.models.document import Document
from strategic_insight.models.chunk import DocumentChunk
from strategic_insight.services.insight_generator import InsightGenerator
from strategic_insight.storage.local import LocalStorage


class StubGenerator(InsightGenerator):
    """Generator that records prompts and answers with a canned reply"""

    def __init__(self, reply: str = "The sky is blue.", error: Optional[Exception] = None):
        super().__init__(model="stub/model", max_attempts=1)
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests through the HTTP API")


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a temporary database and upload directory"""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        GEMINI_API_KEY="test-key",
        MAX_UPLOAD_SIZE=1024 * 1024,
    )


@pytest.fixture
def test_db_engine(test_settings):
    """SQLite database file for one test, with all tables created"""
    engine = create_db_engine(test_settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(test_db_engine) -> Generator[Session, None, None]:
    """Database session for one test"""
    session = create_session_factory(test_db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(test_settings) -> LocalStorage:
    """Local storage rooted at the temporary upload directory"""
    return LocalStorage(base_path=test_settings.UPLOAD_DIR)


@pytest.fixture
def stub_generator() -> StubGenerator:
    return StubGenerator()


@pytest.fixture
def test_user(db_session) -> User:
    """Create a test user"""
    user = User(email="test@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_document(db_session, test_user) -> Document:
    """Create a test document with two chunks (no stored file)"""
    document = Document(
        user_id=test_user.id,
        file_name="notes.txt",
        storage_path="notes.txt",
        content_type="text/plain",
        size_bytes=11,
    )
    db_session.add(document)
    db_session.flush()
    db_session.add_all([
        DocumentChunk(document_id=document.id, chunk_index=0, content="first"),
        DocumentChunk(document_id=document.id, chunk_index=1, content="second"),
    ])
    db_session.commit()
    db_session.refresh(document)
    return document


@pytest.fixture
def app_context(test_settings, test_db_engine, storage, stub_generator) -> AppContext:
    """Application context with the stub generator injected"""
    return AppContext.from_settings(
        test_settings,
        generator=stub_generator,
        storage=storage,
        engine=test_db_engine,
    )


@pytest.fixture
def client(app_context):
    """Test client for the full application"""
    from fastapi.testclient import TestClient
    from strategic_insight.main import create_app

    app = create_app(context=app_context)
    with TestClient(app) as test_client:
        yield test_client
