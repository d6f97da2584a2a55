from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

from caterease.core.enums import EventType
from caterease.schemas.caterer import CatererResponse
from caterease.schemas.menu import MenuResponse


# --- CREATE ---
class OrderCreate(BaseModel):
    caterer_id: int
    menu_id: int
    event_type: EventType
    no_of_plates: int = Field(..., ge=1)
    event_date: date
    event_time: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    special_instructions: Optional[str] = None

    class Config:
        use_enum_values = True


# --- UPDATE (Caterer) ---
class OrderStatusUpdate(BaseModel):
    status: str = Field(
        ...,
        description="Allowed values: pending, confirmed, preparing, ready, delivered, cancelled"
    )


# --- RESPONSE ---
class OrderResponse(BaseModel):
    id: int
    user_id: int
    caterer_id: int
    menu_id: int
    event_type: str
    no_of_plates: int
    total_price: int
    event_date: date
    event_time: str
    address: str
    city: str
    state: str
    special_instructions: Optional[str]
    status: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class OrderSummary(OrderResponse):
    caterer_name: str
    menu_name: str


class OrderDetailResponse(OrderResponse):
    caterer: Optional[CatererResponse]
    menu: Optional[MenuResponse]
    user_name: str
