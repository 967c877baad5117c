"""
Shared fixtures: an in-memory database, a mocked news provider and a
TestClient bound to a freshly built application.
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from newsdesk.config import Settings
from newsdesk.core.news_gateway import NewsGateway
from newsdesk.main import create_app


def provider_response(status_code=200, body=None):
    """Build a fake requests.Response returned by the mocked provider."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body if body is not None else {}
    response.text = str(body)
    return response


def news_payload(*urls, total=None):
    articles = [
        {
            "source": {"id": None, "name": "Example Times"},
            "author": "Reporter",
            "title": f"Story {url}",
            "description": "Something happened",
            "url": url,
            "urlToImage": f"{url}/image.jpg",
            "publishedAt": "2024-05-01T10:00:00Z",
        }
        for url in urls
    ]
    return {"status": "ok", "totalResults": len(articles) if total is None else total, "articles": articles}


@pytest.fixture
def settings():
    return Settings(
        news_api_key="test-api-key",
        news_api_url="https://news.example/v2",
        database_url="sqlite://",
        jwt_secret_key="test-secret",
    )


@pytest.fixture
def provider():
    """Mocked requests.Session used by the gateway."""
    return MagicMock()


@pytest.fixture
def gateway(settings, provider):
    return NewsGateway(settings, session=provider)


@pytest.fixture
def app(settings, gateway):
    return create_app(settings, news_gateway=gateway)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register(client):
    """Register a user over HTTP and return auth headers for it."""
    def _register(username="alice", password="s3cret-pass"):
        response = client.post("/api/auth/register", json={"username": username, "password": password})
        assert response.status_code == 201
        return {"x-auth-token": response.json()["token"]}
    return _register


@pytest.fixture
def make_response():
    return provider_response


@pytest.fixture
def make_news():
    return news_payload
