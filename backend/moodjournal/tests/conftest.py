"""
Shared fixtures: in-memory database, test settings and a stubbed OpenAI API.
"""
import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from moodjournal.main import app
from moodjournal.core.config import Settings, get_settings
from moodjournal.db.base import Base
from moodjournal.db.session import get_db
from moodjournal.api.dependencies import get_recommendation_composer
from moodjournal.services.recommendation_service import RecommendationComposer
import moodjournal.models  # noqa: F401


class FakeOpenAI:
    """Stands in for the Chat Completions endpoint via httpx.MockTransport."""

    def __init__(self):
        self.status_code = 200
        self.content = "Go for a short walk and call a friend."
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "quota exceeded"}})
        return httpx.Response(200, json={
            "choices": [{"message": {"role": "assistant", "content": self.content}}]
        })

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def test_settings():
    return Settings(
        SECRET_KEY="test-secret-key",
        BCRYPT_ROUNDS=4,
        DATABASE_URL="sqlite://",
        OPENAI_API_KEY="test-openai-key",
    )


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory, test_settings, fake_openai):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_recommendation_composer] = lambda: RecommendationComposer(
        test_settings, transport=fake_openai.transport()
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register and log in a user; returns the Authorization header."""
    def _auth_headers(email="writer@example.com", password="secret123"):
        client.post("/register", json={"email": email, "password": password})
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _auth_headers
