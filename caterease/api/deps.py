from fastapi import Depends
from sqlalchemy.orm import Session

from caterease.db.base import get_db
from caterease.services.auth import AuthService
from caterease.services.caterers import CatererService
from caterease.services.orders import OrderService
from caterease.services.reviews import ReviewService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_caterer_service(db: Session = Depends(get_db)) -> CatererService:
    return CatererService(db)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)
