import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from caterease.core.exceptions import InvalidInputError, NotFoundError, PermissionDeniedError
from caterease.db.models import Caterer, Menu, Review
from caterease.db.repositories import CatererRepository, MenuRepository, ReviewRepository

logger = logging.getLogger(__name__)


class CatererService:
    def __init__(self, db: Session):
        self.db = db
        self.caterers = CatererRepository(db)
        self.menus = MenuRepository(db)
        self.reviews = ReviewRepository(db)

    # -------------------------
    # Public browsing
    # -------------------------
    def list_caterers(self) -> List[Caterer]:
        return self.caterers.list()

    def search_caterers(self, location: Optional[str] = None, event_type: Optional[str] = None) -> List[Caterer]:
        return self.caterers.search(location=location, event_type=event_type)

    def get_caterer(self, caterer_id: int) -> Caterer:
        caterer = self.caterers.get(caterer_id)
        if not caterer:
            raise NotFoundError("Caterer not found")
        return caterer

    def get_caterer_detail(self, caterer_id: int) -> dict:
        caterer = self.get_caterer(caterer_id)
        return {
            "caterer": caterer,
            "menus": self.menus.list_by_caterer(caterer.id),
            "reviews": self.reviews.list_by_caterer(caterer.id),
        }

    def list_menus(self, caterer_id: int) -> List[Menu]:
        return self.menus.list_by_caterer(self.get_caterer(caterer_id).id)

    def list_reviews(self, caterer_id: int) -> List[Review]:
        return self.reviews.list_by_caterer(self.get_caterer(caterer_id).id)

    # -------------------------
    # Owner-only mutations
    # -------------------------
    def update_profile(self, caterer: Caterer, changes: dict) -> Caterer:
        min_plate = changes.get("min_plate", caterer.min_plate)
        max_plate = changes.get("max_plate", caterer.max_plate)
        if min_plate is None or max_plate is None:
            raise InvalidInputError("Plate limits cannot be empty")
        if min_plate > max_plate:
            raise InvalidInputError("min_plate cannot be greater than max_plate")

        # explicit nulls only clear optional fields
        changes = {k: v for k, v in changes.items() if v is not None or k == "description"}
        self.caterers.update(caterer, changes)
        self.db.commit()
        self.db.refresh(caterer)
        logger.info("Caterer %s updated profile fields %s", caterer.id, sorted(changes))
        return caterer

    def add_menu(self, caterer: Caterer, data: dict) -> Menu:
        menu = self.menus.create(caterer_id=caterer.id, **data)
        self.db.commit()
        self.db.refresh(menu)
        logger.info("Caterer %s created menu %s", caterer.id, menu.id)
        return menu

    def _owned_menu(self, caterer: Caterer, menu_id: int, action: str) -> Menu:
        menu = self.menus.get(menu_id)
        if not menu:
            raise NotFoundError("Menu not found")
        if menu.caterer_id != caterer.id:
            raise PermissionDeniedError(f"You don't have permission to {action} this menu")
        return menu

    def update_menu(self, caterer: Caterer, menu_id: int, changes: dict) -> Menu:
        menu = self._owned_menu(caterer, menu_id, "edit")
        changes = {k: v for k, v in changes.items() if v is not None or k == "description"}
        self.menus.update(menu, changes)
        self.db.commit()
        self.db.refresh(menu)
        logger.info("Caterer %s updated menu %s", caterer.id, menu.id)
        return menu

    def delete_menu(self, caterer: Caterer, menu_id: int) -> None:
        menu = self._owned_menu(caterer, menu_id, "delete")
        self.menus.deactivate(menu)
        self.db.commit()
        logger.info("Caterer %s deactivated menu %s", caterer.id, menu.id)
