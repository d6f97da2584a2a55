import logging
import threading
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from caterease.core.enums import OrderStatus
from caterease.core.exceptions import ConflictError, InvalidInputError, NotFoundError, PermissionDeniedError
from caterease.db.models import Review, User
from caterease.db.repositories import CatererRepository, OrderRepository, ReviewRepository

logger = logging.getLogger(__name__)

# one lock per caterer around the aggregate read-modify-write
_caterer_locks = defaultdict(threading.Lock)
_caterer_locks_guard = threading.Lock()


def _lock_for(caterer_id: int) -> threading.Lock:
    with _caterer_locks_guard:
        return _caterer_locks[caterer_id]


def round_half_up(total: int, count: int) -> int:
    """Mean of `count` ratings summing to `total`, halves rounded up (3.5 -> 4, 2.5 -> 3)."""
    if count == 0:
        return 0
    return int((Decimal(total) / Decimal(count)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ReviewService:
    def __init__(self, db: Session):
        self.db = db
        self.reviews = ReviewRepository(db)
        self.orders = OrderRepository(db)
        self.caterers = CatererRepository(db)

    def add_review(self, user: User, order_id: int, rating: int, comment=None) -> Review:
        order = self.orders.get(order_id)
        if not order:
            raise NotFoundError("Order not found")

        if order.user_id != user.id:
            raise PermissionDeniedError("You don't have permission to review this order")

        if order.status != OrderStatus.DELIVERED.value:
            raise InvalidInputError("You can only review delivered orders")

        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= 5:
            raise InvalidInputError("Rating must be an integer between 1 and 5")

        with _lock_for(order.caterer_id):
            if self.reviews.get_by_order(order.id):
                raise ConflictError("This order has already been reviewed")

            review = self.reviews.create(
                order_id=order.id,
                user_id=user.id,
                caterer_id=order.caterer_id,
                rating=rating,
                comment=comment,
            )
            caterer = self.caterers.add_rating(order.caterer_id, rating)
            caterer.rating = round_half_up(caterer.rating_total, caterer.review_count)
            self.db.commit()

        self.db.refresh(review)
        logger.info("Review %s added for caterer %s (rating %s, now %s over %s reviews)",
                    review.id, caterer.id, rating, caterer.rating, caterer.review_count)
        return review
