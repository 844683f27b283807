# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, String, CheckConstraint

metadata = MetaData()

# sqlite_autoincrement: ids are never reused after a delete
users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    CheckConstraint("length(name) >= 3", name="ck_users_name_min_length"),
    sqlite_autoincrement=True,
)
