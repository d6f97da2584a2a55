"""
Order lifecycle.

Orders are placed by users against one caterer and one of that caterer's
menus, and afterwards only their status moves, driven by the owning
caterer:

    pending -> confirmed -> preparing -> ready -> delivered

Any non-terminal order may also be cancelled. `delivered` and
`cancelled` are terminal.
"""
import logging
import threading
from typing import List, Optional

from sqlalchemy.orm import Session

from caterease.core.config import settings
from caterease.core.enums import OrderStatus
from caterease.core.exceptions import InvalidInputError, NotFoundError, PermissionDeniedError
from caterease.db.models import Caterer, Order, User
from caterease.db.repositories import CatererRepository, MenuRepository, OrderRepository, UserRepository

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PREPARING, OrderStatus.CANCELLED},
    OrderStatus.PREPARING: {OrderStatus.READY, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}

# validation reads and the insert must not interleave between requests
_order_creation_lock = threading.Lock()


def parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidInputError("Invalid status")


def is_transition_allowed(current: str, target: str) -> bool:
    return OrderStatus(target) in ALLOWED_TRANSITIONS[OrderStatus(current)]


class OrderService:
    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderRepository(db)
        self.caterers = CatererRepository(db)
        self.menus = MenuRepository(db)
        self.users = UserRepository(db)

    def place_order(self, user: User, data: dict) -> Order:
        with _order_creation_lock:
            caterer = self.caterers.get(data["caterer_id"])
            if not caterer:
                raise NotFoundError("Caterer not found")

            menu = self.menus.get(data["menu_id"])
            if not menu:
                raise NotFoundError("Menu not found")

            if menu.caterer_id != caterer.id:
                raise InvalidInputError("Menu does not belong to the selected caterer")

            plates = data["no_of_plates"]
            if plates < caterer.min_plate or plates > caterer.max_plate:
                raise InvalidInputError(
                    f"Order must be between {caterer.min_plate} and {caterer.max_plate} plates"
                )

            order = self.orders.create(
                user_id=user.id,
                caterer_id=caterer.id,
                menu_id=menu.id,
                event_type=data["event_type"],
                no_of_plates=plates,
                total_price=plates * menu.price_per_plate,
                event_date=data["event_date"],
                event_time=data["event_time"],
                address=data["address"],
                city=data["city"],
                state=data["state"],
                special_instructions=data.get("special_instructions"),
                status=OrderStatus.PENDING.value,
            )
            self.db.commit()

        self.db.refresh(order)
        logger.info("Order %s placed by user %s with caterer %s (%s plates)",
                    order.id, user.id, caterer.id, plates)
        return order

    def list_user_orders(self, user: User) -> List[dict]:
        summaries = []
        for order in self.orders.list_by_user(user.id):
            caterer = self.caterers.get(order.caterer_id)
            menu = self.menus.get(order.menu_id, include_inactive=True)
            summaries.append({
                **_order_fields(order),
                "caterer_name": caterer.business_name if caterer else "Unknown Caterer",
                "menu_name": menu.name if menu else "Unknown Menu",
            })
        return summaries

    def list_caterer_orders(self, caterer: Caterer) -> List[Order]:
        return self.orders.list_by_caterer(caterer.id)

    def get_order_detail(self, user: User, order_id: int) -> dict:
        order = self.orders.get(order_id)
        if not order:
            raise NotFoundError("Order not found")

        # purchasers see their own orders, caterers see orders placed with them
        if order.user_id != user.id:
            own_caterer = self.caterers.get_by_user_id(user.id)
            if not own_caterer or order.caterer_id != own_caterer.id:
                raise PermissionDeniedError("You don't have permission to view this order")

        purchaser = self.users.get(order.user_id)
        return {
            **_order_fields(order),
            "caterer": self.caterers.get(order.caterer_id),
            "menu": self.menus.get(order.menu_id, include_inactive=True),
            "user_name": purchaser.name if purchaser else "Unknown User",
        }

    def update_order_status(self, caterer: Caterer, order_id: int, status: Optional[str]) -> Order:
        if not status:
            raise InvalidInputError("Status is required")
        target = parse_status(status)

        order = self.orders.get(order_id)
        if not order:
            raise NotFoundError("Order not found")

        if order.caterer_id != caterer.id:
            raise PermissionDeniedError("You don't have permission to update this order")

        if settings.ENFORCE_STATUS_TRANSITIONS and not is_transition_allowed(order.status, target):
            raise InvalidInputError(
                f"Cannot change order status from {order.status} to {target.value}"
            )

        previous = order.status
        self.orders.set_status(order, target.value)
        self.db.commit()
        self.db.refresh(order)
        logger.info("Order %s status %s -> %s", order.id, previous, order.status)
        return order


def _order_fields(order: Order) -> dict:
    return {column.name: getattr(order, column.name) for column in Order.__table__.columns}
