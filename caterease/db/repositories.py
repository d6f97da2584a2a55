"""
Repository layer.

Each repository wraps a SQLAlchemy session and exposes the lookups the
domain services need for one entity. Services never build queries
themselves, so another backend only has to provide the same methods.
"""
from typing import List, Optional

from sqlalchemy import func, or_, update
from sqlalchemy.orm import Session

from caterease.db.models import Caterer, Menu, Order, Review, User, UserSession


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, **fields) -> User:
        user = User(**fields)
        self.db.add(user)
        self.db.flush()
        return user

    def list(self, role: Optional[str] = None) -> List[User]:
        q = self.db.query(User)
        if role:
            q = q.filter(User.role == role)
        return q.order_by(User.id).all()

    def count(self, role: Optional[str] = None) -> int:
        q = self.db.query(func.count(User.id))
        if role:
            q = q.filter(User.role == role)
        return q.scalar() or 0


class SessionRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, session_id: str) -> Optional[UserSession]:
        return self.db.get(UserSession, session_id)

    def create(self, session_id: str, user_id: int) -> UserSession:
        row = UserSession(id=session_id, user_id=user_id)
        self.db.add(row)
        self.db.flush()
        return row

    def delete(self, session_id: str) -> bool:
        row = self.get(session_id)
        if not row:
            return False
        self.db.delete(row)
        self.db.flush()
        return True


class CatererRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, caterer_id: int) -> Optional[Caterer]:
        return self.db.get(Caterer, caterer_id)

    def get_by_user_id(self, user_id: int) -> Optional[Caterer]:
        return self.db.query(Caterer).filter(Caterer.user_id == user_id).first()

    def create(self, **fields) -> Caterer:
        caterer = Caterer(**fields)
        self.db.add(caterer)
        self.db.flush()
        return caterer

    def update(self, caterer: Caterer, fields: dict) -> Caterer:
        for field, value in fields.items():
            setattr(caterer, field, value)
        self.db.flush()
        return caterer

    def list(self) -> List[Caterer]:
        return self.db.query(Caterer).order_by(Caterer.id).all()

    def search(self, location: Optional[str] = None, event_type: Optional[str] = None) -> List[Caterer]:
        q = self.db.query(Caterer)
        if location:
            pattern = f"%{location.lower()}%"
            q = q.filter(or_(
                func.lower(Caterer.location).like(pattern),
                func.lower(Caterer.city).like(pattern),
                func.lower(Caterer.state).like(pattern),
            ))
        caterers = q.order_by(Caterer.id).all()
        if event_type:
            # event_types is a JSON array; an empty list means the caterer serves any event
            caterers = [c for c in caterers if not c.event_types or event_type in c.event_types]
        return caterers

    def add_rating(self, caterer_id: int, rating: int) -> Caterer:
        """Atomically fold one rating into the stored sum and count."""
        self.db.execute(
            update(Caterer)
            .where(Caterer.id == caterer_id)
            .values(
                rating_total=Caterer.rating_total + rating,
                review_count=Caterer.review_count + 1,
            )
            .execution_options(synchronize_session=False)
        )
        caterer = self.get(caterer_id)
        self.db.refresh(caterer)
        return caterer

    def count(self) -> int:
        return self.db.query(func.count(Caterer.id)).scalar() or 0


class MenuRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, menu_id: int, include_inactive: bool = False) -> Optional[Menu]:
        menu = self.db.get(Menu, menu_id)
        if menu is None or (not menu.is_active and not include_inactive):
            return None
        return menu

    def list_by_caterer(self, caterer_id: int) -> List[Menu]:
        return (
            self.db.query(Menu)
            .filter(Menu.caterer_id == caterer_id, Menu.is_active == True)  # noqa: E712
            .order_by(Menu.id)
            .all()
        )

    def create(self, **fields) -> Menu:
        menu = Menu(**fields)
        self.db.add(menu)
        self.db.flush()
        return menu

    def update(self, menu: Menu, fields: dict) -> Menu:
        for field, value in fields.items():
            setattr(menu, field, value)
        self.db.flush()
        return menu

    def deactivate(self, menu: Menu) -> None:
        menu.is_active = False
        self.db.flush()


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, order_id: int) -> Optional[Order]:
        return self.db.get(Order, order_id)

    def list_by_user(self, user_id: int) -> List[Order]:
        return self.db.query(Order).filter(Order.user_id == user_id).order_by(Order.id.desc()).all()

    def list_by_caterer(self, caterer_id: int) -> List[Order]:
        return self.db.query(Order).filter(Order.caterer_id == caterer_id).order_by(Order.id.desc()).all()

    def list(self, status: Optional[str] = None) -> List[Order]:
        q = self.db.query(Order)
        if status:
            q = q.filter(Order.status == status)
        return q.order_by(Order.id.desc()).all()

    def create(self, **fields) -> Order:
        order = Order(**fields)
        self.db.add(order)
        self.db.flush()
        return order

    def set_status(self, order: Order, status: str) -> Order:
        order.status = status
        self.db.flush()
        return order

    def count_by_status(self) -> dict:
        rows = self.db.query(Order.status, func.count(Order.id)).group_by(Order.status).all()
        return {status: count for status, count in rows}


class ReviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_order(self, order_id: int) -> Optional[Review]:
        return self.db.query(Review).filter(Review.order_id == order_id).first()

    def list_by_caterer(self, caterer_id: int) -> List[Review]:
        return self.db.query(Review).filter(Review.caterer_id == caterer_id).order_by(Review.id).all()

    def create(self, **fields) -> Review:
        review = Review(**fields)
        self.db.add(review)
        self.db.flush()
        return review

    def count(self) -> int:
        return self.db.query(func.count(Review.id)).scalar() or 0
