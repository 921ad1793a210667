from fastapi import Depends, Request
from asyncpg import Connection

from app.core.exceptions import TokenInvalidException
from app.db.session import get_db_connection
from app.repositories.user_repo import UserRepository
from app.schemas.auth_schema import TokenPayload


def get_user_repo(conn: Connection = Depends(get_db_connection)) -> UserRepository:
    return UserRepository(conn)


def get_token_payload(request: Request) -> TokenPayload:
    # set by CheckTokenMiddleware for protected paths
    payload = getattr(request.state, "token_payload", None)
    if payload is None:
        raise TokenInvalidException()
    return TokenPayload(**payload)


async def get_current_user(
        token_data: TokenPayload = Depends(get_token_payload),
        user_repo: UserRepository = Depends(get_user_repo),
) -> dict:
    try:
        user_id = int(token_data.sub)
    except (TypeError, ValueError):
        raise TokenInvalidException()

    user_data = await user_repo.get_by_id(user_id)
    if user_data is None:
        raise TokenInvalidException()

    return user_data

