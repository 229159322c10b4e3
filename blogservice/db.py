"""Database access for blog posts."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    delete,
    insert,
    select,
    text,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .model import Blog, BlogData

_log = logging.getLogger(__name__)

_DB_HOST = "go-db"

_metadata = MetaData()

blogs_table = Table(
    "blogs",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("blog_name", String(255)),
    Column("blog_details", String(255)),
    Column("blog_description", String(255)),
)


class RecordNotFoundError(LookupError):
    """Raised when no blog matches the requested id."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Config:
    """Settings handed to the SQL client."""

    db_connection: str = ""


@dataclass(frozen=True)
class Connector:
    """Holds the shared database engine."""

    db_pool: Engine


_connector: Connector | None = None


def connection_url(env: Mapping[str, str] | None = None) -> str:
    """Build the PostgreSQL URL from POSTGRES_USER, POSTGRES_PASSWORD and POSTGRES_DB."""
    if env is None:
        env = os.environ
    user = env.get("POSTGRES_USER", "")
    secret = env.get("POSTGRES_PASSWORD", "")
    database = env.get("POSTGRES_DB", "")
    return f"postgresql://{user}:{secret}@{_DB_HOST}/{database}?sslmode=disable"


def init_pgsql(url: str | None = None) -> Connector:
    """Open the shared connection once and return it on every later call."""
    global _connector
    if _connector is not None:
        _log.info("database is initialized")
        return _connector
    _log.info("database was not initialized, initializing")
    _connector = _init_db(url or connection_url())
    return _connector


def _init_db(url: str) -> Connector:
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        _metadata.create_all(engine)
    except Exception:
        engine.dispose()
        raise
    return Connector(engine)


def get_db_connection() -> Engine:
    """Return the shared engine; the connection must have been initialised."""
    if _connector is None:
        raise RuntimeError("database is not initialized")
    return _connector.db_pool


def reset_connection() -> None:
    """Close the shared connection so that the next init opens a new one."""
    global _connector
    if _connector is not None:
        _connector.db_pool.dispose()
    _connector = None


def _row_to_blog(row: Any) -> Blog:
    return Blog(
        id=row.id,
        blog_name=row.blog_name or "",
        blog_details=row.blog_details or "",
        blog_description=row.blog_description or "",
    )


def _create_blog(blog: Blog) -> BlogData:
    engine = get_db_connection()
    values: dict[str, Any] = {
        "blog_name": blog.blog_name,
        "blog_details": blog.blog_details,
        "blog_description": blog.blog_description,
    }
    if blog.id:
        values["id"] = blog.id
    try:
        with engine.begin() as conn:
            result = conn.execute(insert(blogs_table).values(**values))
            new_id = result.inserted_primary_key[0]
        blog = replace(blog, id=new_id)
    except SQLAlchemyError as err:
        _log.info("failure: %s", err)
    return BlogData(blog=blog, message="data saved")


def _get_blog(blog_id: str) -> Blog:
    engine = get_db_connection()
    query = select(blogs_table).where(blogs_table.c.id == blog_id)
    try:
        with engine.connect() as conn:
            row = conn.execute(query).first()
    except SQLAlchemyError as err:
        _log.info("failure: %s", err)
        raise RuntimeError(f"failed to get blog: {err}") from err
    if row is None:
        raise RecordNotFoundError()
    return _row_to_blog(row)


def _update_blog(blog_id: str, blog: Blog) -> BlogData:
    engine = get_db_connection()
    values = {
        name: value
        for name, value in (
            ("id", blog.id),
            ("blog_name", blog.blog_name),
            ("blog_details", blog.blog_details),
            ("blog_description", blog.blog_description),
        )
        if value
    }
    if values:
        statement = update(blogs_table).where(blogs_table.c.id == blog_id).values(**values)
        try:
            with engine.begin() as conn:
                conn.execute(statement)
        except SQLAlchemyError as err:
            _log.info("failure: %s", err)
    return BlogData(blog=blog, message="record updated successfully")


def _delete_blog(blog_id: str) -> str:
    engine = get_db_connection()
    try:
        with engine.begin() as conn:
            conn.execute(delete(blogs_table).where(blogs_table.c.id == blog_id))
    except SQLAlchemyError as err:
        _log.info("failure: %s", err)
        raise RuntimeError("not able to delete") from err
    return "deleted successfully"


class SqlClient:
    """Blog operations against the shared database connection."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def create_blog_post(self, blog: Blog) -> BlogData:
        """Insert a blog and return it with its assigned id."""
        return _create_blog(blog)

    def get_all_blogs(self, blog_id: str) -> Blog:
        """Return the blog with the given id or raise RecordNotFoundError."""
        return _get_blog(blog_id)

    def update_blogs(self, blog_id: str, blog: Blog) -> BlogData:
        """Write the non-empty fields of ``blog`` to the row with the given id."""
        return _update_blog(blog_id, blog)

    def delete_blog(self, blog_id: str) -> str:
        """Delete the blog with the given id."""
        return _delete_blog(blog_id)


def new_client(config: Config) -> SqlClient:
    """Create a SQL client for the given configuration."""
    return SqlClient(config)