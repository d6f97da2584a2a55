from pydantic import BaseModel
from typing import Optional

from caterease.schemas.caterer import CatererResponse
from caterease.schemas.user import UserResponse


class MeResponse(BaseModel):
    user: UserResponse
    caterer: Optional[CatererResponse] = None


class AuthResponse(MeResponse):
    message: str
    access_token: str
    token_type: str = "bearer"
