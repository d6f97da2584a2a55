# caterease/api/routes/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from caterease.api.deps import get_auth_service
from caterease.core.config import settings
from caterease.core.security import close_session, get_current_user, get_session_token, open_session
from caterease.db.base import get_db
from caterease.db.models import User
from caterease.schemas.auth import AuthResponse, MeResponse
from caterease.schemas.user import CatererRegister, LoginRequest, UserRegister
from caterease.services.auth import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _start_session(response: Response, db: Session, user: User) -> str:
    token = open_session(db, user)
    db.commit()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return token


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegister,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    user = auth.register_user(payload.dict())
    token = _start_session(response, db, user)
    return {"message": "User registered successfully", "user": user, "access_token": token}


@router.post("/register-caterer", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_caterer(
    payload: CatererRegister,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    caterer = auth.register_caterer(payload.dict())
    token = _start_session(response, db, caterer.user)
    return {
        "message": "Caterer registered successfully",
        "user": caterer.user,
        "caterer": caterer,
        "access_token": token,
    }


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    user = auth.authenticate(payload.username, payload.password)
    token = _start_session(response, db, user)
    logger.info("User %s logged in", user.id)
    return {
        "message": "Login successful",
        "user": user,
        "caterer": auth.caterer_for(user),
        "access_token": token,
    }


@router.post("/logout")
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    close_session(db, token)
    db.commit()
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=MeResponse)
def me(
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    return {"user": current_user, "caterer": auth.caterer_for(current_user)}
