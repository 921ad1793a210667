# tests/test_auth_middleware.py
from datetime import timedelta

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.security import create_access_token
from app.middleware.auth_middleware import CheckTokenMiddleware


@pytest.fixture
def calls():
    return []

@pytest.fixture
def client(calls):
    app = FastAPI()
    app.add_middleware(CheckTokenMiddleware, protected_prefixes=("/private",))

    @app.get("/private")
    async def private(request: Request):
        calls.append(request.state.token_payload)
        return {"sub": request.state.token_payload["sub"]}

    @app.get("/public")
    async def public():
        return {"ok": True}

    return TestClient(app)

def test_missing_token_is_denied(client, calls):
    """Test no cookie gives 403 with the denied message"""
    response = client.get("/private")

    assert response.status_code == 403
    assert response.json() == {"msg": settings.MSG_DENIED}
    assert calls == []

def test_garbled_token_is_unauthorized(client, calls):
    """Test an unparseable token gives 401 with the unauthorized message"""
    client.cookies.set(settings.COOKIE_NAME, "garbled")

    response = client.get("/private")

    assert response.status_code == 401
    assert response.json() == {"msg": settings.MSG_UNAUTHORIZED}
    assert calls == []

def test_expired_token_is_unauthorized(client, calls):
    """Test an expired token gives 401"""
    token = create_access_token("7", expires_delta=timedelta(seconds=-30))
    client.cookies.set(settings.COOKIE_NAME, token)

    response = client.get("/private")

    assert response.status_code == 401
    assert response.json() == {"msg": settings.MSG_UNAUTHORIZED}
    assert calls == []

def test_valid_token_reaches_handler(client, calls):
    """Test a valid token passes through and exposes its payload"""
    client.cookies.set(settings.COOKIE_NAME, create_access_token("7"))

    response = client.get("/private")

    assert response.status_code == 200
    assert response.json() == {"sub": "7"}
    assert len(calls) == 1

def test_unprotected_path_skips_check(client):
    """Test paths outside the protected prefixes need no token"""
    response = client.get("/public")

    assert response.status_code == 200

def test_prefix_does_not_guard_sibling_paths():
    """Test a protected prefix does not swallow paths that merely share its start"""
    app = FastAPI()
    app.add_middleware(CheckTokenMiddleware, protected_prefixes=("/private",))

    @app.get("/privatenotes")
    async def sibling():
        return {"ok": True}

    @app.get("/private/inner")
    async def inner():
        return {"ok": True}

    client = TestClient(app)

    assert client.get("/privatenotes").status_code == 200
    assert client.get("/private/inner").status_code == 403
