# caterease/schemas/admin.py
from pydantic import BaseModel
from typing import Dict


class AdminStatsResponse(BaseModel):
    total_users: int
    total_caterers: int
    total_orders: int
    total_reviews: int
    orders_by_status: Dict[str, int]
