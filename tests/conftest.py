# tests/conftest.py
import os

# Settings() is built at import time, so the environment must be ready first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "test")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASS", "test")

import pytest


@pytest.fixture
def stored_user():
    return {
        "id": 1,
        "name": "Maria Silva",
        "email": "maria@example.com",
        "national_id": "12345678901",
        "passwd": "$2b$04$notarealhashnotarealhashnotarealhashnotarealhashno",
    }
