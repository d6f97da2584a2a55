# caterease/api/routes/caterers.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from caterease.api.deps import get_caterer_service, get_order_service
from caterease.core.security import require_caterer
from caterease.db.models import Caterer
from caterease.schemas.caterer import CatererDetailResponse, CatererProfileUpdate, CatererResponse
from caterease.schemas.menu import MenuCreate, MenuResponse, MenuUpdate
from caterease.schemas.order import OrderResponse
from caterease.schemas.review import ReviewResponse
from caterease.services.caterers import CatererService
from caterease.services.orders import OrderService

router = APIRouter(prefix="/caterers", tags=["caterers"])


# Public browsing

@router.get("", response_model=List[CatererResponse])
def list_caterers(service: CatererService = Depends(get_caterer_service)):
    return service.list_caterers()


@router.get("/search", response_model=List[CatererResponse])
def search_caterers(
    location: Optional[str] = Query(None, description="Matches location, city or state"),
    event_type: Optional[str] = Query(None, alias="eventType"),
    service: CatererService = Depends(get_caterer_service),
):
    return service.search_caterers(location=location, event_type=event_type)


# Caterer-only routes are declared before /{caterer_id}

@router.get("/orders", response_model=List[OrderResponse])
def my_orders(
    caterer: Caterer = Depends(require_caterer),
    orders: OrderService = Depends(get_order_service),
):
    return orders.list_caterer_orders(caterer)


@router.put("/profile", response_model=CatererResponse)
def update_profile(
    update_data: CatererProfileUpdate,
    caterer: Caterer = Depends(require_caterer),
    service: CatererService = Depends(get_caterer_service),
):
    return service.update_profile(caterer, update_data.dict(exclude_unset=True))


@router.post("/menus", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
def create_menu(
    menu_data: MenuCreate,
    caterer: Caterer = Depends(require_caterer),
    service: CatererService = Depends(get_caterer_service),
):
    return service.add_menu(caterer, menu_data.dict())


@router.put("/menus/{menu_id}", response_model=MenuResponse)
def update_menu(
    menu_id: int,
    update_data: MenuUpdate,
    caterer: Caterer = Depends(require_caterer),
    service: CatererService = Depends(get_caterer_service),
):
    return service.update_menu(caterer, menu_id, update_data.dict(exclude_unset=True))


@router.delete("/menus/{menu_id}")
def delete_menu(
    menu_id: int,
    caterer: Caterer = Depends(require_caterer),
    service: CatererService = Depends(get_caterer_service),
):
    service.delete_menu(caterer, menu_id)
    return {"message": "Menu deleted successfully"}


@router.get("/{caterer_id}", response_model=CatererDetailResponse)
def get_caterer(caterer_id: int, service: CatererService = Depends(get_caterer_service)):
    return service.get_caterer_detail(caterer_id)


@router.get("/{caterer_id}/menus", response_model=List[MenuResponse])
def get_caterer_menus(caterer_id: int, service: CatererService = Depends(get_caterer_service)):
    return service.list_menus(caterer_id)


@router.get("/{caterer_id}/reviews", response_model=List[ReviewResponse])
def get_caterer_reviews(caterer_id: int, service: CatererService = Depends(get_caterer_service)):
    return service.list_reviews(caterer_id)
