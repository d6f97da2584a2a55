import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from caterease.core.exceptions import ConflictError, InvalidInputError
from caterease.core.security import hash_password, verify_password
from caterease.db.models import Caterer, User
from caterease.db.repositories import CatererRepository, UserRepository

logger = logging.getLogger(__name__)

USER_FIELDS = ("username", "email", "name", "phone", "address", "city", "state")
CATERER_FIELDS = (
    "business_name", "description", "location", "city", "state",
    "min_plate", "max_plate", "specialties", "event_types",
)


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.caterers = CatererRepository(db)

    def _ensure_unique(self, username: str, email: str) -> None:
        if self.users.get_by_username(username):
            raise ConflictError("Username is already taken")
        if self.users.get_by_email(email):
            raise ConflictError("Email is already registered")

    def _create_user(self, data: dict, role: str) -> User:
        self._ensure_unique(data["username"], data["email"])
        return self.users.create(
            **{field: data.get(field) for field in USER_FIELDS},
            password_hash=hash_password(data["password"]),
            role=role,
        )

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            # a concurrent registration won the unique index
            self.db.rollback()
            raise ConflictError("Username or email is already registered")

    def register_user(self, data: dict) -> User:
        # self-registration never grants caterer or admin rights
        user = self._create_user(data, role="user")
        self._commit()
        self.db.refresh(user)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def register_caterer(self, data: dict) -> Caterer:
        if data["min_plate"] > data["max_plate"]:
            raise InvalidInputError("min_plate cannot be greater than max_plate")

        user = self._create_user(data, role="caterer")
        fields = {field: data.get(field) for field in CATERER_FIELDS}
        fields["specialties"] = fields["specialties"] or []
        fields["event_types"] = fields["event_types"] or []
        caterer = self.caterers.create(user_id=user.id, **fields)
        self._commit()
        self.db.refresh(caterer)
        logger.info("Registered caterer %s for user %s", caterer.id, user.id)
        return caterer

    def authenticate(self, username: str, password: str) -> User:
        user = self.users.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", username)
            raise InvalidInputError("Invalid username or password")
        return user

    def caterer_for(self, user: User) -> Optional[Caterer]:
        if user.role != "caterer":
            return None
        return self.caterers.get_by_user_id(user.id)
