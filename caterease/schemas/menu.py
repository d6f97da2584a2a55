# caterease/schemas/menu.py

from pydantic import BaseModel, Field
from typing import List, Optional

from caterease.core.enums import MealType


# Shared fields
class MenuBase(BaseModel):
    name: str = Field(..., min_length=1)
    meal_type: MealType
    price_per_plate: int = Field(..., ge=0)
    description: Optional[str] = None
    items: List[str] = Field(..., min_length=1)
    is_vegetarian: bool = False
    is_special: bool = False

    class Config:
        use_enum_values = True


# Caterer creates menu
class MenuCreate(MenuBase):
    pass


# Caterer updates menu
class MenuUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    meal_type: Optional[MealType] = None
    price_per_plate: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    items: Optional[List[str]] = Field(None, min_length=1)
    is_vegetarian: Optional[bool] = None
    is_special: Optional[bool] = None

    class Config:
        use_enum_values = True


# What API returns
class MenuResponse(BaseModel):
    id: int
    caterer_id: int
    name: str
    meal_type: str
    price_per_plate: int
    description: Optional[str]
    items: List[str]
    is_vegetarian: bool
    is_special: bool

    class Config:
        from_attributes = True
