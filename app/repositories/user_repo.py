from typing import Any, Iterable, Mapping, Optional
from asyncpg import Connection

from app.schemas.user_schema import UserField, object_key


def _strip(record, exclude: Iterable[UserField]) -> dict:
    user = dict(record)
    for field in exclude:
        user.pop(field.value, None)
    return user


class UserRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    async def find_one(self, criteria: Mapping[str, Any], exclude: Iterable[UserField] = ()) -> Optional[dict]:
        field, value = object_key(criteria)
        # column name comes from the UserField enum, never from the caller
        sql = f"SELECT * FROM users WHERE {field.value} = $1;"
        record = await self.conn.fetchrow(sql, value)
        return _strip(record, exclude) if record else None

    async def get_by_id(self, user_id: int, exclude: Iterable[UserField] = ()) -> Optional[dict]:
        sql = "SELECT * FROM users WHERE id = $1;"
        record = await self.conn.fetchrow(sql, user_id)
        return _strip(record, exclude) if record else None

    async def create(self, user_in: dict) -> dict:
        sql = """
            INSERT INTO users (name, email, national_id, passwd)
            VALUES ($1, $2, $3, $4)
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            user_in["name"],
            user_in["email"],
            user_in["national_id"],
            user_in["passwd"],
        )
        return dict(record)

    async def update(self, user: dict) -> dict:
        sql = """
            UPDATE users
            SET name = $2, email = $3, national_id = $4, passwd = $5
            WHERE id = $1
            RETURNING *;
        """
        record = await self.conn.fetchrow(
            sql,
            user["id"],
            user["name"],
            user["email"],
            user["national_id"],
            user["passwd"],
        )
        return dict(record)
