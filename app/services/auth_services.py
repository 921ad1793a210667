import logging
from datetime import timedelta
from typing import Any, Mapping, Optional

from jose import ExpiredSignatureError, JWTError
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.exceptions import (
    InputValidationException,
    TokenExpiredException,
    TokenInvalidException,
    TokenMissingException,
    UserAlreadyExistsException,
)
from app.core.security import create_access_token, decode_access_token, hash_password, verify_password
from app.core.validation import clean_user_input, validate_input
from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import UserField
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = tuple(field.value for field in UserField)


def verify_request_token(token: Optional[str]) -> dict:
    """Check a session token taken from the request cookies.

    Raises TokenMissingException (403) when there is no token and
    TokenInvalidException (401) when it fails signature, expiry or format
    checks. Returns the decoded payload otherwise.
    """
    if not token:
        raise TokenMissingException()
    try:
        return decode_access_token(token)
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise TokenInvalidException()


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo
        self.users = UserService(user_repo)

    async def register_user(self, data: Mapping[str, Any]) -> dict:
        user_in = clean_user_input(data)
        missing = [field for field in REQUIRED_FIELDS if field not in user_in]
        if missing:
            raise InputValidationException(
                [{"loc": field, "msg": "Field required", "type": "missing"} for field in missing]
            )

        password = user_in.pop(UserField.PASSWORD.value)

        if await self.users.find_user_by_field({UserField.EMAIL.value: user_in["email"]}):
            raise UserAlreadyExistsException("email")
        if await self.users.find_user_by_field({UserField.NATIONAL_ID.value: user_in["national_id"]}):
            raise UserAlreadyExistsException("national id")

        user_in[UserField.PASSWORD.value] = await run_in_threadpool(hash_password, password)
        created = await self.user_repo.create(user_in=user_in)
        logger.info("Registered user id=%s", created.get("id"))
        return created

    async def authenticate(self, identifier: str, password: str) -> Optional[dict]:
        if "@" in identifier:
            # look the address up in the same normalized form it was stored in
            try:
                identifier = validate_input({UserField.EMAIL.value: identifier})[UserField.EMAIL.value]
            except InputValidationException:
                return None
            key = UserField.EMAIL
        else:
            key = UserField.NATIONAL_ID
        user = await self.users.find_user_by_field({key.value: identifier})
        if not user:
            return None
        if not await run_in_threadpool(verify_password, password, user.get("passwd", "")):
            return None
        return user

    def create_token_for_user(self, user: dict) -> str:
        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        return create_access_token(subject=str(user["id"]), expires_delta=access_token_expires)
