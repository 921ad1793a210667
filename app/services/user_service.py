from typing import Any, Mapping, Optional

from starlette.concurrency import run_in_threadpool

from app.core.security import hash_password
from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import SENSITIVE_FIELDS, UserField, object_key


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def find_user_by_field(self, field: Mapping[str, Any], restrict: bool = False) -> Optional[dict]:
        """Look a user up by a single-key mapping such as ``{"email": ...}``.

        With ``restrict`` the national id and password hash are left out of the
        result. Returns None when no user matches.
        """
        exclude = SENSITIVE_FIELDS if restrict else ()
        return await self.user_repo.find_one(field, exclude=exclude)

    async def update_user_field(self, user: dict, field: Mapping[str, Any]) -> dict:
        """Assign a single field on ``user``; passwords are stored re-hashed.

        The record is only mutated in memory, persisting it is up to the caller.
        """
        key, value = object_key(field)

        if key is not UserField.PASSWORD:
            user[key.value] = value
            return user

        user[key.value] = await run_in_threadpool(hash_password, value)
        return user
