# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

DB_URL = "sqlite://"  # in-memory, gone when the process exits


@lru_cache
def get_engine() -> Engine:
    # A single shared connection keeps the in-memory database alive
    # across requests and threadpool workers.
    return create_engine(
        DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
