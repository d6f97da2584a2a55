# caterease/schemas/caterer.py
from pydantic import BaseModel, Field
from typing import List, Optional

from caterease.core.enums import EventType
from caterease.schemas.menu import MenuResponse
from caterease.schemas.review import ReviewResponse


class CatererResponse(BaseModel):
    id: int
    user_id: int
    business_name: str
    description: Optional[str]
    location: str
    city: str
    state: str
    min_plate: int
    max_plate: int
    rating: int
    review_count: int
    specialties: List[str]
    event_types: List[str]

    class Config:
        from_attributes = True


# Caterer updates profile; aggregates and owner are not editable
class CatererProfileUpdate(BaseModel):
    business_name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    location: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=1)
    min_plate: Optional[int] = Field(None, ge=1)
    max_plate: Optional[int] = Field(None, ge=1)
    specialties: Optional[List[str]] = None
    event_types: Optional[List[EventType]] = None

    class Config:
        use_enum_values = True


class CatererDetailResponse(BaseModel):
    caterer: CatererResponse
    menus: List[MenuResponse]
    reviews: List[ReviewResponse]
