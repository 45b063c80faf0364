"""
Integration tests for the Strategic Insight HTTP API

Tests:
- User registration
- Document upload, listing, lookup and deletion
- Document analysis and chat history
- Error responses
"""

import pytest

from strategic_insight.core.exceptions import GenerationError
from strategic_insight.models.chat_message import ChatMessage
from strategic_insight.models.chunk import DocumentChunk


def _register(client, email="analyst@example.com"):
    response = client.post("/api/users", json={"email": email})
    assert response.status_code == 201
    return response.json()["id"]


def _upload(client, user_id, file_name="sky.txt", content=b"The sky is blue.", content_type="text/plain"):
    return client.post(
        "/api/documents/upload",
        files={"file": (file_name, content, content_type)},
        data={"user_id": user_id},
    )


@pytest.mark.integration
class TestUsersAPI:
    """Tests for /api/users"""

    def test_create_user(self, client):
        response = client.post("/api/users", json={"email": "analyst@example.com"})

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "analyst@example.com"
        assert data["id"]

    def test_duplicate_email_conflicts(self, client):
        _register(client)

        response = client.post("/api/users", json={"email": "analyst@example.com"})

        assert response.status_code == 409

    def test_invalid_email_rejected(self, client):
        response = client.post("/api/users", json={"email": "not-an-email"})

        assert response.status_code == 422


@pytest.mark.integration
class TestDocumentsAPI:
    """Tests for /api/documents"""

    def test_upload_text_file(self, client, db_session, storage):
        user_id = _register(client)

        response = _upload(client, user_id)

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == user_id
        assert data["file_name"] == "sky.txt"
        assert data["content_type"] == "text/plain"
        assert data["size_bytes"] == len(b"The sky is blue.")
        assert storage.read(data["storage_path"]) == b"The sky is blue."

        chunks = db_session.query(DocumentChunk).filter(DocumentChunk.document_id == data["id"]).all()
        assert [(c.chunk_index, c.content) for c in chunks] == [(0, "The sky is blue.")]

    def test_upload_requires_user_id(self, client, storage):
        response = _upload(client, "")

        assert response.status_code == 400
        assert response.json()["error"] == "missing_owner"
        assert list(storage.base_path.iterdir()) == []

    def test_upload_rejects_unsupported_format(self, client, storage):
        user_id = _register(client)

        response = _upload(client, user_id, file_name="photo.png", content=b"\x89PNG", content_type="image/png")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "unsupported_format"
        assert body["message"] == "Only PDF, TXT, and DOCX files are allowed"
        assert list(storage.base_path.iterdir()) == []

    def test_upload_rejects_oversized_file(self, client, test_settings):
        user_id = _register(client)

        response = _upload(client, user_id, content=b"x" * (test_settings.MAX_UPLOAD_SIZE + 1))

        assert response.status_code == 413
        assert response.json()["error"] == "payload_too_large"

    def test_upload_for_unknown_user(self, client):
        response = _upload(client, "no-such-user")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_upload_corrupt_docx_fails_without_orphan(self, client, storage):
        user_id = _register(client)

        response = _upload(
            client, user_id,
            file_name="memo.docx",
            content=b"definitely not a zip",
            content_type="application/octet-stream",
        )

        assert response.status_code == 500
        assert response.json()["error"] == "extraction_failed"
        assert list(storage.base_path.iterdir()) == []
        assert client.get("/api/documents", params={"user_id": user_id}).json() == []

    def test_list_documents_newest_first_and_stable(self, client):
        user_id = _register(client)
        other_id = _register(client, "other@example.com")
        first = _upload(client, user_id, file_name="a.txt").json()
        second = _upload(client, user_id, file_name="b.txt").json()
        _upload(client, other_id, file_name="c.txt")

        listing = client.get("/api/documents", params={"user_id": user_id})
        again = client.get("/api/documents", params={"user_id": user_id})

        assert listing.status_code == 200
        ids = [doc["id"] for doc in listing.json()]
        assert set(ids) == {first["id"], second["id"]}
        assert ids[0] == second["id"]
        assert listing.json() == again.json()

    def test_list_documents_requires_user_id(self, client):
        response = client.get("/api/documents")

        assert response.status_code == 400

    def test_get_document(self, client):
        user_id = _register(client)
        created = _upload(client, user_id).json()

        response = client.get(f"/api/documents/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_document(self, client):
        response = client.get("/api/documents/does-not-exist")

        assert response.status_code == 404

    def test_delete_document_cascades(self, client, db_session, storage):
        user_id = _register(client)
        created = _upload(client, user_id, content=b"y" * 2500).json()
        client.post(
            f"/api/documents/{created['id']}/analyze",
            params={"user_id": user_id},
            json={"query": "How long is it?"},
        )

        response = client.delete(f"/api/documents/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/documents/{created['id']}").status_code == 404
        assert client.get(f"/api/documents/{created['id']}/chat-history").status_code == 404
        assert db_session.query(DocumentChunk).filter(DocumentChunk.document_id == created["id"]).count() == 0
        assert db_session.query(ChatMessage).filter(ChatMessage.document_id == created["id"]).count() == 0
        assert not storage.exists(created["storage_path"])

    def test_delete_unknown_document(self, client):
        response = client.delete("/api/documents/does-not-exist")

        assert response.status_code == 404


@pytest.mark.integration
class TestAnalyzeAPI:
    """Tests for document analysis and chat history"""

    def test_analyze_and_read_history(self, client, stub_generator):
        user_id = _register(client)
        document = _upload(client, user_id).json()

        response = client.post(
            f"/api/documents/{document['id']}/analyze",
            params={"user_id": user_id},
            json={"query": "What color is the sky?"},
        )

        assert response.status_code == 200
        assert response.json() == {"response": "The sky is blue."}
        assert "The sky is blue.\n" in stub_generator.prompts[0]
        assert stub_generator.prompts[0].endswith("Query: What color is the sky?")

        history = client.get(f"/api/documents/{document['id']}/chat-history")

        assert history.status_code == 200
        messages = history.json()
        assert [(m["message_type"], m["message_content"]) for m in messages] == [
            ("user", "What color is the sky?"),
            ("assistant", "The sky is blue."),
        ]
        assert messages[0]["timestamp"] == messages[1]["timestamp"]
        assert all(m["user_id"] == user_id for m in messages)

    def test_analyze_empty_document(self, client, stub_generator):
        user_id = _register(client)
        document = _upload(client, user_id, file_name="empty.txt", content=b"").json()

        response = client.post(
            f"/api/documents/{document['id']}/analyze",
            params={"user_id": user_id},
            json={"query": "Anything in here?"},
        )

        assert response.status_code == 200
        assert len(stub_generator.prompts) == 1
        assert len(client.get(f"/api/documents/{document['id']}/chat-history").json()) == 2

    def test_analyze_requires_user_id(self, client, stub_generator):
        user_id = _register(client)
        document = _upload(client, user_id).json()

        response = client.post(f"/api/documents/{document['id']}/analyze", json={"query": "Hi?"})

        assert response.status_code == 400
        assert stub_generator.prompts == []

    def test_analyze_unknown_document(self, client):
        user_id = _register(client)

        response = client.post(
            "/api/documents/does-not-exist/analyze",
            params={"user_id": user_id},
            json={"query": "Hi?"},
        )

        assert response.status_code == 404

    def test_generation_failure_is_bad_gateway(self, client, stub_generator):
        user_id = _register(client)
        document = _upload(client, user_id).json()
        stub_generator.error = GenerationError("LLM API call failed: quota exceeded")

        response = client.post(
            f"/api/documents/{document['id']}/analyze",
            params={"user_id": user_id},
            json={"query": "Hi?"},
        )

        assert response.status_code == 502
        assert response.json()["error"] == "generation_failed"
        assert client.get(f"/api/documents/{document['id']}/chat-history").json() == []

    def test_chat_history_unknown_document(self, client):
        response = client.get("/api/documents/does-not-exist/chat-history")

        assert response.status_code == 404


@pytest.mark.integration
class TestHealthAPI:
    """Tests for health endpoints"""

    def test_root(self, client, test_settings):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == test_settings.APP_NAME

    def test_health_checks_database(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
