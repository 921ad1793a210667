from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from app.api.v1.deps import get_user_repo
from app.core.config import settings
from app.core.cookies import delete_cookie, set_cookie
from app.core.exceptions import InvalidCredentialsException
from app.repositories.user_repo import UserRepository
from app.schemas.auth_schema import MessageOut, UserLogin
from app.schemas.user_schema import UserOut
from app.services.auth_services import AuthService

router = APIRouter(tags=["auth"], prefix="/api/v1/auth")


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(response: Response,
                   payload: Dict[str, Any] = Body(...),
                   user_repo: UserRepository = Depends(get_user_repo)):
    auth_svc = AuthService(user_repo)
    created = await auth_svc.register_user(payload)
    set_cookie(response, {settings.COOKIE_NAME: auth_svc.create_token_for_user(created)})
    return created


@router.post("/login", response_model=UserOut)
async def login(credentials: UserLogin,
                response: Response,
                user_repo: UserRepository = Depends(get_user_repo)):
    auth_svc = AuthService(user_repo)
    user = await auth_svc.authenticate(credentials.identifier, credentials.password)
    if not user:
        raise InvalidCredentialsException()
    set_cookie(response, {settings.COOKIE_NAME: auth_svc.create_token_for_user(user)})
    return user


@router.post("/logout", response_model=MessageOut)
async def logout(response: Response):
    delete_cookie(response, settings.COOKIE_NAME)
    return MessageOut(msg="Logged out.")
