# app/main.py

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.products import router as products_router
from app.api.users import router as users_router
from app.config import get_settings
from app.db.seed import reset_db
from app.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Every start begins from the seed users; nothing survives a restart."""
    logger.info("Starting %s in %s mode", settings.app_name, settings.environment)
    n_users = reset_db()
    logger.info("Loaded %s seed users", n_users)
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan,
)

if settings.is_development:
    app.middleware("http")(log_requests)
    logger.debug("Request logging enabled")

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
def greeting():
    return "Hola mundo desde FastAPI!"


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(users_router)
app.include_router(products_router)

# Mounted last so the API routes and "/" win over files of the same name
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
