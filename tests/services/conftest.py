# tests/services/conftest.py
from __future__ import annotations

import time

import pytest
from jose import jwt
from starlette.testclient import TestClient

from cinereview.common.settings import AuthConfig
from cinereview.domain.errors import InvalidArgument, MovieNotFound
from cinereview.services.api.app import create_app
from cinereview.services.api.deps import (
    get_identity_verifier,
    get_movie_catalog,
    get_movie_upstream,
    get_review_store,
    get_user_directory,
)
from cinereview.services.auth.jwt_verifier import JwtIdentityVerifier

TEST_SECRET = "test-secret"


def make_token(sub: str, *, secret: str = TEST_SECRET, ttl: int = 3600, **claims) -> str:
    now = int(time.time())
    payload = {"sub": sub, "iat": now, "exp": now + ttl, **claims}
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(sub: str) -> dict:
    return {"Authorization": f"Bearer {make_token(sub)}"}


class FakeUpstream:
    """Records calls; returns canned payloads."""

    def __init__(self) -> None:
        self.calls = []

    def popular(self, page=1):
        self.calls.append(("popular", page))
        return {"page": page, "results": [{"id": 550, "title": "Fight Club"}]}

    def search(self, query, page=1):
        if not (query or "").strip():
            raise InvalidArgument("Query parameter is required")
        self.calls.append(("search", query, page))
        return {"page": page, "results": []}

    def details(self, movie_id):
        self.calls.append(("details", movie_id))
        if movie_id == 404:
            raise MovieNotFound()
        return {"id": movie_id, "title": "Fight Club"}

    def recommendations(self, movie_id, page=1):
        self.calls.append(("recommendations", movie_id, page))
        return {"page": page, "results": []}


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def api_client(store, catalog, users, upstream):
    """
    TestClient over the in-memory adapters. Every request in one test shares
    the same store, so POST -> GET works.
    """
    app = create_app()
    verifier = JwtIdentityVerifier(AuthConfig(jwt_secret=TEST_SECRET))

    app.dependency_overrides[get_review_store] = lambda: store
    app.dependency_overrides[get_movie_catalog] = lambda: catalog
    app.dependency_overrides[get_user_directory] = lambda: users
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    app.dependency_overrides[get_movie_upstream] = lambda: upstream

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def token_for():
    return make_token


@pytest.fixture()
def auth():
    """auth("user123") -> Authorization header dict."""
    return bearer
