"""Data types exchanged by the blog service and their JSON shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_META_OPTIONAL_KEYS = (
    ("message", "statusType"),
    ("error_detail", "errorDetail"),
    ("error_message", "errorMessage"),
    ("dev_message", "devErrorMessage"),
)

_BLOG_FIELD_TYPES: dict[str, type] = {
    "id": int,
    "blog_name": str,
    "blog_details": str,
    "blog_description": str,
}


@dataclass(frozen=True)
class ResponseMeta:
    """Status block attached to every API response."""

    app_status_code: int
    message: str = ""
    error_detail: str = ""
    error_message: str = ""
    dev_message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out empty optional fields."""
        result: dict[str, Any] = {"code": self.app_status_code}
        for attribute, key in _META_OPTIONAL_KEYS:
            value = getattr(self, attribute)
            if value:
                result[key] = value
        return result


@dataclass(frozen=True)
class Blog:
    """A single blog post as stored in the ``blogs`` table."""

    id: int = 0
    blog_name: str = ""
    blog_details: str = ""
    blog_description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form; empty details and description are left out."""
        result: dict[str, Any] = {"id": self.id, "blog_name": self.blog_name}
        if self.blog_details:
            result["blog_details"] = self.blog_details
        if self.blog_description:
            result["blog_description"] = self.blog_description
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Blog:
        """Build a blog from a decoded JSON object.

        Keys match case-insensitively, unknown keys are ignored and ``null``
        leaves a field at its default. A value of the wrong type raises
        :class:`TypeError`.
        """
        if not isinstance(data, Mapping):
            raise TypeError("blog must be a JSON object")
        values: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            name = key.lower()
            expected = _BLOG_FIELD_TYPES.get(name)
            if expected is None or value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, expected):
                raise TypeError(
                    f"cannot decode {type(value).__name__} into field {name!r} "
                    f"of type {expected.__name__}"
                )
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class BlogData:
    """A blog together with a message describing what was done to it."""

    blog: Blog = field(default_factory=Blog)
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {"blog": self.blog.to_dict(), "message": self.message}