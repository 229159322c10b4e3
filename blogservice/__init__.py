"""JSON blog-post HTTP service with SQL storage, built on Flask and SQLAlchemy."""

__version__ = "0.1.0"