from pydantic import BaseModel
from typing import Optional

class TokenPayload(BaseModel):
    sub: Optional[str] = None

class UserLogin(BaseModel):
    # email or national id
    identifier: str
    password: str

class MessageOut(BaseModel):
    msg: str
