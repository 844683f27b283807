# app/__init__.py
"""
Usuarios API package. Exposes the FastAPI instance so the server can be
started with:
    uvicorn app:app --reload
"""

from .main import app

__all__ = ["app"]
