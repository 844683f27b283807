# app/api/users.py

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, HTTPException, Request, status
from pydantic import ValidationError
from sqlalchemy import select

from app.db.engine import get_engine
from app.db.schema import users
from app.models.users import UserIn, UserOut, validation_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])

# Largest value a SQLite INTEGER column can hold
MAX_USER_ID = 2**63 - 1


def _row_to_user(row) -> UserOut:
    return UserOut(id=row["id"], name=row["name"])


def _parse_id(raw: str) -> Optional[int]:
    """
    Path ids that are not plain digits, or too large to ever be stored,
    cannot match a user.
    """
    if not (raw.isascii() and raw.isdigit()):
        return None
    user_id = int(raw)
    if user_id > MAX_USER_ID:
        return None
    return user_id


def _find_user(conn, user_id: str):
    key = _parse_id(user_id)
    if key is None:
        return None

    stmt = select(users.c.id, users.c.name).where(users.c.id == key)
    return conn.execute(stmt).mappings().first()


def _not_found(user_id: str) -> HTTPException:
    logger.info("User %s not found", user_id)
    return HTTPException(status_code=404, detail=f"User {user_id} not found")


def _validate_user(payload: Any) -> UserIn:
    """
    Validate a request body against UserIn, turning failures into a 400.
    """
    try:
        return UserIn.model_validate(payload)
    except ValidationError as exc:
        message = validation_message(exc)
        logger.warning("Rejected user payload: %s", message)
        raise HTTPException(status_code=400, detail=message)


# Each route also answers with a trailing slash; the static mount at "/"
# would otherwise swallow those paths before any slash redirect happens.

@router.get("", response_model=List[UserOut])
@router.get("/", response_model=List[UserOut], include_in_schema=False)
def list_users() -> List[UserOut]:
    """
    Return the whole collection, in creation order.
    """
    engine = get_engine()

    with engine.connect() as conn:
        stmt = select(users.c.id, users.c.name).order_by(users.c.id)
        rows = conn.execute(stmt).mappings().all()

    return [_row_to_user(row) for row in rows]


@router.get("/{user_id}", response_model=UserOut)
@router.get("/{user_id}/", response_model=UserOut, include_in_schema=False)
def get_user(user_id: str) -> UserOut:
    engine = get_engine()

    with engine.connect() as conn:
        row = _find_user(conn, user_id)

    if row is None:
        raise _not_found(user_id)

    return _row_to_user(row)


@router.get("/{year}/{month}")
@router.get("/{year}/{month}/", include_in_schema=False)
def echo_query(year: str, month: str, request: Request) -> Dict[str, Union[str, List[str]]]:
    """
    Echo the query string back as JSON. The path values are ignored.

    e.g. /api/usuarios/1990/2/?nombre=xxxx&single=y -> {"nombre": "xxxx", "single": "y"}
    """
    echoed: Dict[str, Union[str, List[str]]] = {}

    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        echoed[key] = values if len(values) > 1 else values[0]

    return echoed


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_user(payload: Optional[Any] = Body(default=None)) -> UserOut:
    """
    Append a new user. The id comes from the table's AUTOINCREMENT counter,
    so ids freed by a delete are never handed out again.
    """
    user_in = _validate_user(payload)

    engine = get_engine()

    with engine.begin() as conn:
        result = conn.execute(users.insert().values(name=user_in.name))
        new_id = result.inserted_primary_key[0]

    logger.info("Created user %s (%s)", new_id, user_in.name)
    return UserOut(id=new_id, name=user_in.name)


@router.put("/{user_id}", response_model=UserOut)
@router.put("/{user_id}/", response_model=UserOut, include_in_schema=False)
def update_user(user_id: str, payload: Optional[Any] = Body(default=None)) -> UserOut:
    """
    Rename an existing user. A missing user is reported before the body is
    looked at.
    """
    engine = get_engine()

    with engine.connect() as conn:
        row = _find_user(conn, user_id)

    if row is None:
        raise _not_found(user_id)

    user_in = _validate_user(payload)

    with engine.begin() as conn:
        conn.execute(
            users.update()
            .where(users.c.id == row["id"])
            .values(name=user_in.name)
        )

    logger.info("Updated user %s (%s)", row["id"], user_in.name)
    return UserOut(id=row["id"], name=user_in.name)


@router.delete("/{user_id}", response_model=UserOut)
@router.delete("/{user_id}/", response_model=UserOut, include_in_schema=False)
def delete_user(user_id: str) -> UserOut:
    """
    Remove a user and return the removed record.
    """
    engine = get_engine()

    with engine.begin() as conn:
        row = _find_user(conn, user_id)
        if row is None:
            raise _not_found(user_id)

        removed = _row_to_user(row)
        conn.execute(users.delete().where(users.c.id == removed.id))

    logger.info("Deleted user %s (%s)", removed.id, removed.name)
    return removed
