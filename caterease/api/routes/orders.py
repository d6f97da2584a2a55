from typing import List

from fastapi import APIRouter, Depends, status

from caterease.api.deps import get_order_service, get_review_service
from caterease.core.security import get_current_user, require_caterer
from caterease.db.models import Caterer, User
from caterease.schemas.order import (
    OrderCreate,
    OrderDetailResponse,
    OrderResponse,
    OrderStatusUpdate,
    OrderSummary,
)
from caterease.schemas.review import ReviewCreate, ReviewResponse
from caterease.services.orders import OrderService
from caterease.services.reviews import ReviewService

router = APIRouter(prefix="/orders", tags=["orders"])


# User places order

@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def place_order(
    order: OrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.place_order(current_user, order.dict())


# User views their orders

@router.get("", response_model=List[OrderSummary])
def my_orders(
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.list_user_orders(current_user)


@router.get("/{order_id}", response_model=OrderDetailResponse)
def get_order(
    order_id: int,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
):
    return service.get_order_detail(current_user, order_id)


# Caterer moves the order along its lifecycle

@router.put("/{order_id}/status", response_model=OrderResponse)
def update_status(
    order_id: int,
    update: OrderStatusUpdate,
    caterer: Caterer = Depends(require_caterer),
    service: OrderService = Depends(get_order_service),
):
    return service.update_order_status(caterer, order_id, update.status)


# Purchaser reviews a delivered order

@router.post("/{order_id}/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def add_review(
    order_id: int,
    review_in: ReviewCreate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
):
    return service.add_review(current_user, order_id, review_in.rating, review_in.comment)
