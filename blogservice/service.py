"""Blog storage service sitting between the HTTP handlers and the database."""

from __future__ import annotations

import logging
from typing import Protocol

from .db import SqlClient
from .model import Blog, BlogData

_log = logging.getLogger(__name__)


class BlogStorage(Protocol):
    """Operations the HTTP handlers need from a blog store."""

    def list(self) -> list[Blog]:
        """Return every known blog."""
        ...

    def get(self, blog_id: str) -> Blog:
        """Return the blog with the given id."""
        ...

    def create(self, post: Blog) -> BlogData:
        """Store a new blog."""
        ...

    def update(self, blog_id: str, post: Blog) -> BlogData:
        """Update the blog with the given id."""
        ...

    def delete(self, blog_id: str) -> str:
        """Delete the blog with the given id."""
        ...


class BlogStore:
    """Blog storage backed by a SQL client."""

    def __init__(self, sql_db: SqlClient) -> None:
        self.sql_db = sql_db

    def list(self) -> list[Blog]:
        """Listing is not backed by the database and always yields nothing."""
        return []

    def get(self, blog_id: str) -> Blog:
        """Fetch one blog; errors from the client propagate."""
        try:
            return self.sql_db.get_all_blogs(blog_id)
        except Exception as err:
            _log.info("failure: not getting data from table: %s", err)
            raise

    def create(self, post: Blog) -> BlogData:
        """Insert a blog; errors from the client propagate."""
        try:
            return self.sql_db.create_blog_post(post)
        except Exception as err:
            _log.info("failure: not saving data to table: %s", err)
            raise

    def update(self, blog_id: str, post: Blog) -> BlogData:
        """Update a blog; errors from the client propagate."""
        try:
            return self.sql_db.update_blogs(blog_id, post)
        except Exception as err:
            _log.info("failure: not updating data in table: %s", err)
            raise

    def delete(self, blog_id: str) -> str:
        """Delete a blog; errors from the client propagate."""
        try:
            return self.sql_db.delete_blog(blog_id)
        except Exception as err:
            _log.info("failure: record is not available in the system: %s", err)
            raise


def new_service(sql_db: SqlClient) -> BlogStore:
    """Create a blog store over the given SQL client."""
    return BlogStore(sql_db)