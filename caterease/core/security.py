# caterease/core/security.py
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from caterease.core.config import settings
from caterease.core.exceptions import NotAuthenticatedError, PermissionDeniedError
from caterease.db.base import get_db
from caterease.db.models import Caterer, User
from caterease.db.repositories import CatererRepository, SessionRepository, UserRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def open_session(db: Session, user: User) -> str:
    """Persist a new session for `user` and return its signed token."""
    session_id = secrets.token_urlsafe(24)
    SessionRepository(db).create(session_id, user.id)
    return create_access_token({"sub": str(user.id), "sid": session_id})


def close_session(db: Session, token: Optional[str]) -> None:
    if not token:
        return
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return
    session_id = payload.get("sid")
    if session_id:
        SessionRepository(db).delete(session_id)


def get_session_token(request: Request, bearer: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    # an explicit Authorization header wins over the cookie
    return bearer or request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise NotAuthenticatedError("Unauthorized. Please login to continue.")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id = int(payload.get("sub"))
        session_id = payload.get("sid")
    except (JWTError, TypeError, ValueError):
        raise NotAuthenticatedError("Unauthorized. Please login to continue.")

    session = SessionRepository(db).get(session_id) if session_id else None
    if session is None or session.user_id != user_id:
        raise NotAuthenticatedError("Session expired. Please login again.")

    user = UserRepository(db).get(user_id)
    if not user:
        raise NotAuthenticatedError("User not found. Please login again.")
    return user


def require_caterer(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Caterer:
    """Resolve the caller's own caterer profile; the id never comes from the client."""
    if current_user.role != "caterer":
        raise PermissionDeniedError("Access denied. Only caterers can perform this action.")
    caterer = CatererRepository(db).get_by_user_id(current_user.id)
    if not caterer:
        raise PermissionDeniedError("Caterer profile not found. Please complete your profile.")
    return caterer


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "admin":
        raise PermissionDeniedError("Access denied. Only admins can perform this action.")
    return current_user
