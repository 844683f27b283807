# app/db/seed.py

from app.db.engine import get_engine
from app.db.schema import metadata, users

SEED_USERS = [
    {"id": 1, "name": "Juan"},
    {"id": 2, "name": "Karen"},
    {"id": 3, "name": "Diego"},
    {"id": 4, "name": "Maria"},
]


def reset_db() -> int:
    """
    Rebuild the users table from scratch and load the seed records.

    Dropping the table also drops its AUTOINCREMENT counter, so the next
    created user after a reset gets id len(SEED_USERS) + 1.
    """
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(users.insert(), SEED_USERS)

    return len(SEED_USERS)
