import logging

from sqlalchemy.orm import Session

from caterease.core.config import settings
from caterease.core.security import hash_password
from caterease.db import models  # noqa: F401  (registers tables on Base.metadata)
from caterease.db.base import Base
from caterease.db.repositories import UserRepository

logger = logging.getLogger(__name__)


def create_tables(bind) -> None:
    Base.metadata.create_all(bind=bind)


def init_db(db: Session) -> None:
    """Create tables and the first admin account when one is configured."""
    create_tables(db.get_bind())

    username = settings.FIRST_ADMIN_USERNAME
    if not (username and settings.FIRST_ADMIN_EMAIL and settings.FIRST_ADMIN_PASSWORD):
        return

    users = UserRepository(db)
    if users.get_by_username(username):
        return

    users.create(
        username=username,
        email=settings.FIRST_ADMIN_EMAIL,
        password_hash=hash_password(settings.FIRST_ADMIN_PASSWORD),
        role="admin",
        name="Administrator",
        phone="0000000000",
    )
    db.commit()
    logger.info("Created admin account %s", username)
