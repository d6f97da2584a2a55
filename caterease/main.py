"""
CaterEase - bulk catering marketplace API
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from caterease.api.routes import admin as admin_router
from caterease.api.routes import auth as auth_router
from caterease.api.routes import caterers as caterers_router
from caterease.api.routes import orders as orders_router
from caterease.core.config import settings
from caterease.core.exceptions import register_exception_handlers
from caterease.core.logging import configure_logging
from caterease.db.base import SessionLocal
from caterease.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()
    logger.info("%s started", settings.APP_NAME)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
def root():
    return {"message": "CaterEase API running"}


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "caterease-api"}


app.include_router(auth_router.router, prefix=settings.API_PREFIX)
app.include_router(caterers_router.router, prefix=settings.API_PREFIX)
app.include_router(orders_router.router, prefix=settings.API_PREFIX)
app.include_router(admin_router.router, prefix=settings.API_PREFIX)
