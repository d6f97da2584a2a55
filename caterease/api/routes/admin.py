# caterease/api/routes/admin.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional, List

from caterease.core.enums import OrderStatus, UserRole
from caterease.core.security import require_admin
from caterease.db.base import get_db
from caterease.db.models import User
from caterease.db.repositories import CatererRepository, OrderRepository, ReviewRepository, UserRepository
from caterease.schemas.admin import AdminStatsResponse
from caterease.schemas.order import OrderResponse
from caterease.schemas.user import UserResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=List[UserResponse])
def list_users(
    role: Optional[UserRole] = Query(None, description="user/caterer/admin"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return UserRepository(db).list(role=role.value if role else None)


@router.get("/orders", response_model=List[OrderResponse])
def list_orders(
    status: Optional[OrderStatus] = Query(None),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return OrderRepository(db).list(status=status.value if status else None)


@router.get("/stats", response_model=AdminStatsResponse)
def stats(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    orders_by_status = OrderRepository(db).count_by_status()
    return {
        "total_users": UserRepository(db).count(),
        "total_caterers": CatererRepository(db).count(),
        "total_orders": sum(orders_by_status.values()),
        "total_reviews": ReviewRepository(db).count(),
        "orders_by_status": {s.value: orders_by_status.get(s.value, 0) for s in OrderStatus},
    }
