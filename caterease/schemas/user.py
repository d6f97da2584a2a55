from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import List, Optional

from caterease.core.enums import EventType


class UserRegister(BaseModel):
    username: str = Field(..., min_length=3)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2)
    phone: str = Field(..., min_length=10)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class CatererRegister(UserRegister):
    business_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    location: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    min_plate: int = Field(..., ge=1)
    max_plate: int = Field(..., ge=1)
    specialties: List[str] = []
    event_types: List[EventType] = []

    class Config:
        use_enum_values = True

    @model_validator(mode="after")
    def plate_range(self):
        if self.min_plate > self.max_plate:
            raise ValueError("min_plate cannot be greater than max_plate")
        return self


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    role: str
    name: str
    phone: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    class Config:
        from_attributes = True
