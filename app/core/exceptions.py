from typing import Any, List

from fastapi import HTTPException, status

from app.core.config import settings


class InputValidationException(HTTPException):
    def __init__(self, errors: List[dict[str, Any]]):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=settings.MSG_INVALID_INPUT,
        )
        self.errors = errors

class UserAlreadyExistsException(HTTPException):
    def __init__(self, field: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User with this {field} already exists."
        )

class InvalidCredentialsException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email, national id or password.",
        )

class AuthException(HTTPException):
    """Base for session token rejections; rendered as ``{"msg": detail}``."""

class TokenMissingException(AuthException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=settings.MSG_DENIED,
        )

class TokenInvalidException(AuthException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=settings.MSG_UNAUTHORIZED,
        )

class TokenExpiredException(TokenInvalidException):
    pass
