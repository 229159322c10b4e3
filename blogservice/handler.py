"""HTTP handlers for the blog endpoints."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from flask import Blueprint, Response, request

from .httperr import ErrResponse, err_invalid_request, err_not_found_request, http_error
from .httperr import Response as Envelope
from .httperr import new_success_response
from .model import Blog
from .service import BlogStorage

_log = logging.getLogger(__name__)

_FETCH_FAILED = "Unable To Fetch Services "


def _json_response(payload: Any, status: int) -> Response:
    return Response(json.dumps(payload) + "\n", status=status, mimetype="application/json")


def _render(envelope: Envelope | ErrResponse) -> Response:
    status = (
        envelope.http_status_code if isinstance(envelope, ErrResponse) else HTTPStatus.OK
    )
    return _json_response(envelope.to_dict(), int(status))


def _success(data: Any) -> Response:
    return _render(new_success_response(HTTPStatus.OK, data))


def _decode_blog(allow_null: bool) -> Blog:
    data = json.loads(request.get_data(as_text=True))
    if data is None and allow_null:
        return Blog()
    return Blog.from_dict(data)


def _log_failure(err: BaseException, result: Any = None) -> None:
    _log.error("unable to fetch stats: code=%s result=%r error=%s", http_error(err).code, result, err)


@dataclass
class BlogHandler:
    """Serves blog requests from a storage backend."""

    storage: BlogStorage

    def list_posts(self) -> Response:
        """Return every blog as a JSON array."""
        try:
            body = json.dumps([blog.to_dict() for blog in self.storage.list() or []])
        except (TypeError, ValueError):
            return Response(
                "Internal error\n",
                status=HTTPStatus.INTERNAL_SERVER_ERROR,
                mimetype="text/plain",
            )
        return Response(body + "\n", status=HTTPStatus.OK, mimetype="application/json")

    def get_posts(self, blog_id: str) -> Response:
        """Return one blog, or a 404 envelope when it does not exist."""
        try:
            post = self.storage.get(blog_id)
        except Exception as err:
            _log_failure(err)
            if http_error(err).code == HTTPStatus.NOT_FOUND:
                return _render(err_not_found_request(err, str(err)))
            return _render(err_invalid_request(err, _FETCH_FAILED))
        return _success(post)

    def create_post(self) -> Response:
        """Store the blog in the request body; a malformed body gives a 400."""
        try:
            post = _decode_blog(allow_null=False)
        except (ValueError, TypeError) as err:
            return Response(f"{err}\n", status=HTTPStatus.BAD_REQUEST, mimetype="text/plain")
        try:
            post_data = self.storage.create(post)
        except Exception as err:
            _log_failure(err)
            return _render(err_invalid_request(err, _FETCH_FAILED))
        return _success(post_data)

    def update_post(self, blog_id: str) -> Response:
        """Update a blog from the request body."""
        try:
            post = _decode_blog(allow_null=True)
        except (ValueError, TypeError) as err:
            return _render(err_invalid_request(err, str(err)))
        try:
            updated = self.storage.update(blog_id, post)
        except Exception as err:
            _log_failure(err)
            return _render(err_invalid_request(err, _FETCH_FAILED))
        return _success(updated)

    def delete_post(self, blog_id: str) -> Response:
        """Delete a blog."""
        try:
            result = self.storage.delete(blog_id)
        except Exception as err:
            _log_failure(err)
            return _render(err_invalid_request(err, _FETCH_FAILED))
        return _success(result)


def make_blueprint(blog_handler: BlogHandler) -> Blueprint:
    """Build the blog routes, to be mounted under an API prefix."""
    blueprint = Blueprint("blog", __name__)
    blueprint.add_url_rule(
        "/blog/<blog_id>", "get_post", blog_handler.get_posts, methods=["GET"]
    )
    blueprint.add_url_rule(
        "/blog", "create_post", blog_handler.create_post, methods=["POST"]
    )
    blueprint.add_url_rule(
        "/blog/<blog_id>", "update_post", blog_handler.update_post, methods=["PUT"]
    )
    blueprint.add_url_rule(
        "/blog/remove/<blog_id>", "delete_post", blog_handler.delete_post, methods=["DELETE"]
    )
    return blueprint