# tests/test_user_repo.py
import pytest
from unittest.mock import AsyncMock

from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import SENSITIVE_FIELDS


@pytest.mark.asyncio
async def test_get_by_id_with_exclude(stored_user):
    """Test get_by_id drops excluded columns"""
    conn = AsyncMock()
    conn.fetchrow.return_value = stored_user
    repo = UserRepository(conn)

    user = await repo.get_by_id(1, exclude=SENSITIVE_FIELDS)

    assert set(user) == {"id", "name", "email"}
    assert conn.fetchrow.call_args.args[1] == 1

@pytest.mark.asyncio
async def test_create_passes_columns_in_order(stored_user):
    """Test create inserts name, email, national id and hash"""
    conn = AsyncMock()
    conn.fetchrow.return_value = stored_user
    repo = UserRepository(conn)

    created = await repo.create(stored_user)

    assert created == stored_user
    args = conn.fetchrow.call_args.args
    assert "INSERT INTO users" in args[0]
    assert args[1:] == (
        stored_user["name"],
        stored_user["email"],
        stored_user["national_id"],
        stored_user["passwd"],
    )

@pytest.mark.asyncio
async def test_update_writes_by_id(stored_user):
    """Test update targets the record id"""
    conn = AsyncMock()
    conn.fetchrow.return_value = stored_user
    repo = UserRepository(conn)

    await repo.update(stored_user)

    args = conn.fetchrow.call_args.args
    assert args[0].strip().startswith("UPDATE users")
    assert args[1] == stored_user["id"]
