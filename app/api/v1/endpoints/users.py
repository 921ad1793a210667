from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.api.v1.deps import get_current_user, get_user_repo
from app.core.exceptions import InputValidationException, UserAlreadyExistsException
from app.core.validation import clean_user_input
from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import UserField, UserOut
from app.services.user_service import UserService

# every route here sits behind CheckTokenMiddleware
router = APIRouter(prefix="/api/v1/users", tags=["users"])

UNIQUE_FIELDS = (UserField.EMAIL, UserField.NATIONAL_ID)


@router.get("/me", response_model=UserOut)
async def read_current_user(current_user: Dict[str, Any] = Depends(get_current_user)):
    return current_user


@router.patch("/me", response_model=UserOut)
async def update_current_user(
    payload: Dict[str, Any] = Body(...),
    current_user: Dict[str, Any] = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    changes = clean_user_input(payload)
    if not changes:
        raise InputValidationException(
            [{"loc": "body", "msg": "No updatable field given", "type": "missing"}]
        )

    user_svc = UserService(user_repo)
    for field in UNIQUE_FIELDS:
        if field.value not in changes:
            continue
        other = await user_svc.find_user_by_field({field.value: changes[field.value]}, restrict=True)
        if other and other["id"] != current_user["id"]:
            raise UserAlreadyExistsException(field.value.replace("_", " "))

    user = dict(current_user)
    for key, value in changes.items():
        user = await user_svc.update_user_field(user, {key: value})
    return await user_repo.update(user)
