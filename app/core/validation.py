"""
Input validation and sanitization for untrusted user fields.

validate_input() checks the present fields against UserInput and raises
InputValidationException with per-field errors. sanitize_input() neutralizes
embedded markup in every string value. clean_user_input() sanitizes first and
validates the result, so stored values always satisfy the schema.
"""

import re
from typing import Any, Mapping

from pydantic import ValidationError

from app.core.exceptions import InputValidationException
from app.schemas.user_schema import UserField, UserInput

_SCRIPT_BLOCK_RE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

# email is constrained by EmailStr, passwords are only ever hashed
UNSANITIZED_FIELDS = (UserField.EMAIL.value, UserField.PASSWORD.value)


def validate_input(data: Mapping[str, Any]) -> dict[str, Any]:
    try:
        validated = UserInput.model_validate(dict(data))
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise InputValidationException(errors) from e
    return validated.model_dump(exclude_none=True)


def sanitize_text(value: str) -> str:
    value = _SCRIPT_BLOCK_RE.sub("", value)
    value = _TAG_RE.sub("", value)
    value = _CONTROL_RE.sub("", value)
    # a leftover "<" from an unclosed tag must not reach a browser as markup
    return value.replace("<", "&lt;").replace(">", "&gt;")


def sanitize_input(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: sanitize_text(value) if isinstance(value, str) else value
        for key, value in data.items()
    }


def clean_user_input(data: Mapping[str, Any]) -> dict[str, Any]:
    raw = {key: value for key, value in data.items() if key in UNSANITIZED_FIELDS}
    cleaned = sanitize_input({key: value for key, value in data.items() if key not in UNSANITIZED_FIELDS})
    return validate_input({**cleaned, **raw})
