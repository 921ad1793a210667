# tests/test_cookies.py
import pytest
from starlette.responses import Response

from app.core.config import settings
from app.core.cookies import COOKIE_MAX_AGE_MS, set_cookie


def test_cookie_max_age_is_three_days():
    """Test the cookie lifetime constant"""
    assert COOKIE_MAX_AGE_MS == 259200000

def test_set_cookie_flags_in_development(monkeypatch):
    """Test the cookie is HttpOnly, not Secure, and lives 3 days"""
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    response = Response()

    set_cookie(response, {"token": "abc"})

    header = response.headers["set-cookie"]
    assert header.startswith("token=abc")
    assert "HttpOnly" in header
    assert "Max-Age=259200" in header
    assert "Secure" not in header

def test_set_cookie_secure_in_production(monkeypatch):
    """Test production cookies carry the Secure flag"""
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    response = Response()

    set_cookie(response, {"token": "abc"})

    header = response.headers["set-cookie"]
    assert "Secure" in header
    assert "HttpOnly" in header

def test_set_cookie_requires_single_key():
    """Test the value mapping must name exactly one cookie"""
    with pytest.raises(ValueError):
        set_cookie(Response(), {"a": "1", "b": "2"})
